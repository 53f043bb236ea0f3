"""Selection of the operations to run from command-line input."""

import logging
from typing import Dict, Iterable, List, Optional

from woodev.core.errors import SelectionError
from woodev.core.operations.base import OperationDescriptor
from woodev.core.operations.registry import OperationRegistry

logger = logging.getLogger(__name__)


def resolve_selection(
    registry: OperationRegistry,
    name: Optional[str] = None,
    flags: Iterable[str] = (),
) -> List[OperationDescriptor]:
    """Decide which operations run and in what order.

    An explicitly named operation is combined with every operation whose
    trigger flags intersect ``flags``. Each operation appears once, and the
    result follows registration order regardless of input order.

    Args:
        registry: Registry to select from
        name: Operation named as the positional argument, if any
        flags: Short flags supplied on the command line

    Returns:
        Selected operations sorted by registration order (possibly empty)

    Raises:
        SelectionError: If ``name`` is given but not registered
    """
    selected: List[OperationDescriptor] = []

    if name:
        explicit = registry.get(name)
        if explicit is None:
            raise SelectionError(name)
        selected.append(explicit)

    selected.extend(registry.matching(flags))

    unique: Dict[str, OperationDescriptor] = {}
    for op in selected:
        unique.setdefault(op.name, op)

    result = sorted(unique.values(), key=lambda op: op.order)
    logger.debug("Selected operations: %s", [op.name for op in result])
    return result
