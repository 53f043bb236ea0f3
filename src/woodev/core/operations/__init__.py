"""Operation registry, selection, and execution pipeline."""

from woodev.core.operations.base import OperationDescriptor, operation
from woodev.core.operations.pipeline import OperationRunner, RunState
from woodev.core.operations.registry import OperationRegistry, get_default_registry
from woodev.core.operations.runner import execute_operations
from woodev.core.operations.selection import resolve_selection
from woodev.core.operations.types import OperationResult

__all__ = [
    "OperationDescriptor",
    "OperationRegistry",
    "OperationResult",
    "OperationRunner",
    "RunState",
    "execute_operations",
    "get_default_registry",
    "operation",
    "resolve_selection",
]
