"""Operation descriptor: the static record describing one named task."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional

from woodev.core.config import RunConfig
from woodev.core.operations.types import OperationResult
from woodev.core.prompts import PrepareContext

logger = logging.getLogger(__name__)

PrepareFn = Callable[[PrepareContext], Dict[str, Any]]
ActionFn = Callable[[RunConfig], OperationResult]
HookFn = Callable[[RunConfig], None]


@dataclass(frozen=True)
class OperationDescriptor:
    """A named unit of work with an optional preparation step.

    Attributes:
        name: Unique identifier, used for lookup and deduplication
        action: Performs the operation against the accumulated configuration
        trigger_flags: Short CLI flags that select this operation
        prepare: Optional step returning a partial configuration
        on_success: Optional hook run after a successful action
        on_all_complete: Optional hook deferred until every selected
            operation has succeeded
        description: Human-readable summary for listings
        order: Registration position, assigned by OperationRegistry
    """

    name: str
    action: ActionFn
    trigger_flags: FrozenSet[str] = field(default_factory=frozenset)
    prepare: Optional[PrepareFn] = None
    on_success: Optional[HookFn] = None
    on_all_complete: Optional[HookFn] = None
    description: str = ""
    order: int = -1

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Operation name cannot be empty")
        # Accept any iterable of flags from callers
        object.__setattr__(self, "trigger_flags", frozenset(self.trigger_flags))

    def is_triggered_by(self, flags: Iterable[str]) -> bool:
        """Check whether any of ``flags`` selects this operation."""
        return not self.trigger_flags.isdisjoint(flags)

    def report_success(self, config: RunConfig) -> None:
        """Run the success hook, or log the generic completion notice."""
        if self.on_success is not None:
            self.on_success(config)
            return
        logger.info("Completed operation `%s`", self.name, extra={"operation": self.name})


def operation(
    name: str,
    action: ActionFn,
    flags: Iterable[str] = (),
    **kwargs: Any,
) -> OperationDescriptor:
    """Shorthand for declaring an OperationDescriptor in the catalog."""
    return OperationDescriptor(name=name, action=action, trigger_flags=frozenset(flags), **kwargs)
