"""Exception types raised by woodev."""

from typing import Optional


class WoodevError(Exception):
    """Base class for woodev errors."""


class SelectionError(WoodevError):
    """Raised when an explicitly named operation is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'"{name}" is an invalid operation')


class ConfigError(WoodevError):
    """Raised when a preparation step contributes invalid configuration."""

    def __init__(self, operation: str, detail: str) -> None:
        self.operation = operation
        self.detail = detail
        super().__init__(f"Invalid configuration from operation '{operation}': {detail}")


class CommandError(WoodevError):
    """Raised when an external command fails or cannot be started.

    Attributes:
        command: The rendered command line
        returncode: Exit code of the process, None if it never started
        stderr: Captured standard error, if any
    """

    def __init__(
        self,
        command: str,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"{command} could not be started"
        else:
            message = f"{command} failed (exit code {returncode})"
        if stderr:
            message += f": {stderr.strip()}"
        super().__init__(message)
