"""
Woodev directory structure and checkout path resolution.

This module centralizes the paths the operations touch: the tool's own data
directory, the Local sites root, and the plugin directory inside a checkout.
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from woodev.core.config import RunConfig

logger = logging.getLogger(__name__)

PLUGIN_SLUG = "woocommerce"


class WoodevPaths:
    """Manage woodev directories and the locations operations link into."""

    @staticmethod
    def get_base_dir() -> Path:
        """Get base woodev directory."""
        base = os.getenv("WOODEV_DATA_DIR")
        if base:
            return Path(base)
        return Path.home() / ".woodev"

    @staticmethod
    def get_logs_dir() -> Path:
        """Get logs directory."""
        return WoodevPaths.get_base_dir() / "logs"

    @staticmethod
    def get_local_sites_dir() -> Path:
        """Get the root directory holding Local sites."""
        sites = os.getenv("WOODEV_LOCAL_SITES_DIR")
        if sites:
            return Path(sites).expanduser()
        return Path.home() / "Local Sites"

    @staticmethod
    def get_site_plugins_dir(site: str) -> Path:
        """Get the WordPress plugins directory of a Local site.

        Args:
            site: Name of the Local site

        Returns:
            Path to the site's wp-content/plugins directory
        """
        return WoodevPaths.get_local_sites_dir() / site / "app" / "public" / "wp-content" / "plugins"

    @staticmethod
    def get_plugin_dir(checkout: Path) -> Path:
        """Get the plugin source directory inside a monorepo checkout."""
        return checkout / "plugins" / PLUGIN_SLUG

    @staticmethod
    def ensure_directories() -> None:
        """Ensure the woodev data directories exist."""
        WoodevPaths.get_logs_dir().mkdir(parents=True, exist_ok=True, mode=0o700)


def resolve_checkout(config: "RunConfig") -> Path:
    """Return the checkout an operation should work in.

    Falls back to the current working directory when no clone happened in
    this run, so operations run from inside an existing checkout.
    """
    if config.clone_path is not None:
        return config.clone_path
    return Path.cwd()


def enter_directory(path: Union[str, Path]) -> Path:
    """Change the process working directory.

    The change persists for the rest of the run, so every later operation
    observes it.

    Args:
        path: Directory to switch into

    Returns:
        The resolved directory

    Raises:
        FileNotFoundError: If the directory does not exist
    """
    target = Path(path).expanduser().resolve()
    if not target.is_dir():
        raise FileNotFoundError(f"Directory not found: {target}")
    os.chdir(target)
    logger.debug("Working directory set to %s", target)
    return target
