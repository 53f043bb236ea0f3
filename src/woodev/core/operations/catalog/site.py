"""Local site operations: linking, compose mounts, ddev, and the browser."""

import logging
import os
import webbrowser
from pathlib import Path
from typing import Any, Dict

from woodev.core.compose import merge_plugin_mount
from woodev.core.config import RunConfig
from woodev.core.operations.base import operation
from woodev.core.operations.types import OperationResult
from woodev.core.paths import PLUGIN_SLUG, WoodevPaths, resolve_checkout
from woodev.core.prompts import PrepareContext
from woodev.core.shell import run_commands

logger = logging.getLogger(__name__)

COMPOSE_OVERRIDE = Path(".ddev") / "docker-compose.woo.yaml"
DEFAULT_SITE_URL = "http://{site}.local/wp-admin/"


def prepare_site(context: PrepareContext) -> Dict[str, Any]:
    return {"site": context.value("site", "Name of Local site to link?")}


def prepare_project_path(context: PrepareContext) -> Dict[str, Any]:
    path = context.value("path", "Path to the ddev project?", default=str(Path.cwd()))
    return {"path": Path(path).expanduser()}


def link(config: RunConfig) -> OperationResult:
    """Symlink the checkout's plugin into the Local site, replacing any old link."""
    if not config.site:
        return OperationResult.fail("link requires a site name")

    source = WoodevPaths.get_plugin_dir(resolve_checkout(config))
    if not source.is_dir():
        return OperationResult.fail(f"Plugin directory not found: {source}")

    plugins_dir = WoodevPaths.get_site_plugins_dir(config.site)
    if not plugins_dir.is_dir():
        return OperationResult.fail(f"Local site plugins directory not found: {plugins_dir}")

    destination = plugins_dir / PLUGIN_SLUG
    if destination.is_symlink() or destination.is_file():
        destination.unlink()
    elif destination.exists():
        return OperationResult.fail(f"{destination} is a directory, refusing to replace it")

    destination.symlink_to(source, target_is_directory=True)
    logger.info("Linked %s -> %s", destination, source)
    return OperationResult.ok(str(destination))


def mount(config: RunConfig) -> OperationResult:
    """Declare the plugin mount in the ddev project's compose override."""
    if config.path is None:
        return OperationResult.fail("mount requires a ddev project path")

    source = WoodevPaths.get_plugin_dir(resolve_checkout(config))
    compose_file = config.path / COMPOSE_OVERRIDE
    try:
        changed = merge_plugin_mount(compose_file, source)
    except ValueError as e:
        return OperationResult.fail(str(e))
    return OperationResult.ok(str(compose_file), changed=changed)


def start(config: RunConfig) -> OperationResult:
    """Restart the ddev project so mounts take effect."""
    if config.path is None:
        return OperationResult.fail("start requires a ddev project path")
    return run_commands([["ddev", "restart"]], cwd=config.path)


def site_url(site: str) -> str:
    """Build the admin URL of ``site`` from WOODEV_SITE_URL."""
    return os.environ.get("WOODEV_SITE_URL", DEFAULT_SITE_URL).format(site=site)


def check_site(config: RunConfig) -> OperationResult:
    if not config.site:
        return OperationResult.fail("open requires a site name")
    return OperationResult.ok(site_url(config.site))


def open_site(config: RunConfig) -> None:
    """Open the site in a browser once everything else has finished."""
    url = site_url(config.site or "")
    logger.info("Opening %s", url, extra={"operation": "open"})
    webbrowser.open(url)


def get_site_operations():
    """Return the site operations keyed by name."""
    return {
        "link": operation(
            "link",
            link,
            flags=["l", "p"],
            prepare=prepare_site,
            description="Symlink the plugin into a Local site",
        ),
        "mount": operation(
            "mount",
            mount,
            flags=["m", "p"],
            prepare=prepare_project_path,
            description="Mount the plugin into a ddev project via compose override",
        ),
        "start": operation(
            "start",
            start,
            flags=["s", "p"],
            prepare=prepare_project_path,
            description="Restart the ddev project",
        ),
        "open": operation(
            "open",
            check_site,
            flags=["o"],
            prepare=prepare_site,
            on_all_complete=open_site,
            description="Open the site admin in a browser after all other operations",
        ),
    }
