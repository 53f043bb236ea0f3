"""Run configuration accumulated from operation preparation steps."""

from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from woodev.core.errors import ConfigError


class RunConfig(BaseModel):
    """Parameters gathered before any operation runs.

    Every field is optional; each operation's preparation step fills in the
    values it needs and later contributions replace earlier ones.

    Attributes:
        branch: Git branch to clone or check out
        directory: Directory name the clone is created in
        clone_path: Absolute path of the checkout created by this run
        site: Name of the Local site to link or open
        target: Monorepo package the build tools act on
        path: Directory of the ddev project to mount into and start
        test_filter: PHPUnit filter expression for the PHP test operations
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    branch: Optional[str] = None
    directory: Optional[str] = None
    clone_path: Optional[Path] = None
    site: Optional[str] = None
    target: Optional[str] = None
    path: Optional[Path] = None
    test_filter: Optional[str] = None

    @field_validator("branch", "site", mode="before")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        """Trim names and reject blank ones."""
        if v is None:
            return None
        trimmed = str(v).strip()
        if not trimmed:
            raise ValueError("value cannot be empty or whitespace-only")
        return trimmed

    def merge(self, patch: Mapping[str, Any], source: str = "unknown") -> "RunConfig":
        """Return a new config with ``patch`` merged over the fields set so far.

        Args:
            patch: Partial configuration produced by a preparation step
            source: Name of the operation that produced the patch

        Returns:
            A validated RunConfig

        Raises:
            ConfigError: If the patch has unknown keys or invalid values
        """
        data = self.model_dump(exclude_unset=True)
        data.update(patch)
        try:
            return RunConfig.model_validate(data)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ConfigError(source, details) from e
