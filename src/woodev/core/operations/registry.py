"""Operation registry: the ordered, immutable collection of operations.

Registration order is the only source of execution order. The registry is
built once per run and passed explicitly to the resolver and runner.
"""

import dataclasses
import logging
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple

from woodev.core.operations.base import OperationDescriptor

logger = logging.getLogger(__name__)


class OperationRegistry:
    """Ordered collection of operation descriptors with lookup by name."""

    def __init__(self, operations: Sequence[OperationDescriptor]) -> None:
        """Register ``operations`` in the given order.

        Args:
            operations: Descriptors in execution order

        Raises:
            ValueError: If two operations share a name
        """
        registered: List[OperationDescriptor] = []
        by_name: Dict[str, OperationDescriptor] = {}
        for index, op in enumerate(operations):
            if op.name in by_name:
                raise ValueError(f"Duplicate operation name: {op.name}")
            op = dataclasses.replace(op, order=index)
            registered.append(op)
            by_name[op.name] = op
            logger.debug("Registered operation: %s (order=%d)", op.name, index)

        self._operations: Tuple[OperationDescriptor, ...] = tuple(registered)
        self._by_name = by_name

    def __iter__(self) -> Iterator[OperationDescriptor]:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[OperationDescriptor]:
        """Look up an operation by name.

        Returns:
            The descriptor if registered, None otherwise
        """
        return self._by_name.get(name)

    def names(self) -> List[str]:
        """List operation names in registration order."""
        return [op.name for op in self._operations]

    def matching(self, flags: Iterable[str]) -> List[OperationDescriptor]:
        """Return operations selected by any of ``flags``, in registration order."""
        flag_set = frozenset(flags)
        return [op for op in self._operations if op.is_triggered_by(flag_set)]

    def flags(self) -> FrozenSet[str]:
        """Return every trigger flag used by a registered operation."""
        result: FrozenSet[str] = frozenset()
        for op in self._operations:
            result |= op.trigger_flags
        return result


def get_default_registry() -> OperationRegistry:
    """Build the registry of built-in operations."""
    # Import here to avoid circular imports
    from woodev.core.operations.catalog import get_default_operations

    return OperationRegistry(get_default_operations())
