"""Result type returned by operation actions.

Actions report success or failure explicitly through OperationResult so the
pipeline can decide whether to continue without relying on exceptions.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, field_validator


class OperationResult(BaseModel):
    """Outcome of running one operation's action.

    Attributes:
        success: Whether the action completed successfully
        data: Optional payload produced by the action
        error: Error message if the action failed
        metadata: Additional context (e.g., command counts)
    """

    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    metadata: Dict[str, Any] = {}

    @field_validator("error", mode="before")
    @classmethod
    def validate_error(cls, v: Optional[str]) -> Optional[str]:
        """Normalize blank error messages to None."""
        if v is None:
            return None
        trimmed = str(v).strip()
        return trimmed or None

    @classmethod
    def ok(cls, data: Any = None, **metadata: Any) -> "OperationResult":
        """Create a successful result.

        Args:
            data: Optional payload
            **metadata: Additional metadata key-value pairs

        Returns:
            OperationResult marked as successful
        """
        return cls(success=True, data=data, error=None, metadata=metadata)

    @classmethod
    def fail(cls, error: str, **metadata: Any) -> "OperationResult":
        """Create a failed result.

        Args:
            error: Description of the failure
            **metadata: Additional metadata key-value pairs

        Returns:
            OperationResult marked as failed
        """
        return cls(success=False, data=None, error=error, metadata=metadata)
