"""Package manager and build operations for the monorepo."""

from typing import Any, Dict

from woodev.core.config import RunConfig
from woodev.core.operations.base import operation
from woodev.core.operations.types import OperationResult
from woodev.core.paths import PLUGIN_SLUG, enter_directory, resolve_checkout
from woodev.core.prompts import PrepareContext
from woodev.core.shell import run_commands

DEFAULT_TARGET = PLUGIN_SLUG


def prepare_target(context: PrepareContext) -> Dict[str, Any]:
    return {"target": context.option("target", DEFAULT_TARGET)}


def _target(config: RunConfig) -> str:
    return config.target or DEFAULT_TARGET


def install(config: RunConfig) -> OperationResult:
    """Install node and composer dependencies."""
    checkout_dir = enter_directory(resolve_checkout(config))
    return run_commands(
        [
            ["pnpm", "install"],
            ["pnpm", "nx", "composer-install", _target(config)],
        ],
        cwd=checkout_dir,
    )


def build(config: RunConfig) -> OperationResult:
    """Install composer dependencies and build the target package."""
    checkout_dir = enter_directory(resolve_checkout(config))
    target = _target(config)
    return run_commands(
        [
            ["pnpm", "nx", "composer-install", target],
            ["pnpm", "nx", "build", target],
        ],
        cwd=checkout_dir,
    )


def watch(config: RunConfig) -> OperationResult:
    """Rebuild the target package on change; blocks until interrupted."""
    checkout_dir = enter_directory(resolve_checkout(config))
    return run_commands([["pnpm", "nx", "build-watch", _target(config)]], cwd=checkout_dir)


def get_build_operations():
    """Return the build operations keyed by name."""
    return {
        "install": operation(
            "install",
            install,
            flags=["i"],
            prepare=prepare_target,
            description="Install pnpm and composer dependencies",
        ),
        "build": operation(
            "build",
            build,
            flags=["b"],
            prepare=prepare_target,
            description="Build the target package",
        ),
        "watch": operation(
            "watch",
            watch,
            flags=["w"],
            prepare=prepare_target,
            description="Rebuild the target package on change",
        ),
    }
