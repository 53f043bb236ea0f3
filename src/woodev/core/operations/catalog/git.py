"""Version control operations: clone, checkout, stash, and push."""

import logging
import os
from pathlib import Path
from typing import Any, Dict

from woodev.core.config import RunConfig
from woodev.core.errors import CommandError
from woodev.core.operations.base import operation
from woodev.core.operations.types import OperationResult
from woodev.core.paths import enter_directory, resolve_checkout
from woodev.core.prompts import PrepareContext
from woodev.core.shell import capture_stdout, run_commands

logger = logging.getLogger(__name__)

DEFAULT_REPO_URL = "git@github.com:woocommerce/woocommerce.git"


def get_repo_url() -> str:
    """Return the repository to clone, from WOODEV_REPO_URL if set."""
    return os.environ.get("WOODEV_REPO_URL", DEFAULT_REPO_URL)


def get_default_branch() -> str:
    """Return the branch offered by default when prompting."""
    return os.environ.get("WOODEV_DEFAULT_BRANCH", "trunk")


def branch_directory(branch: str) -> str:
    """Turn a branch name into a directory name (``fix/foo`` -> ``fix-foo``)."""
    return branch.replace("/", "-")


def prepare_clone(context: PrepareContext) -> Dict[str, Any]:
    branch = context.value(
        "branch", "What branch would you like to checkout?", default=get_default_branch()
    )
    directory = branch_directory(branch.strip())
    return {
        "branch": branch,
        "directory": directory,
        "clone_path": Path.cwd() / directory,
    }


def clone(config: RunConfig) -> OperationResult:
    """Clone the repository at the configured branch and enter the checkout."""
    if not config.branch or not config.directory or config.clone_path is None:
        return OperationResult.fail("clone requires a branch")

    if config.clone_path.exists():
        return OperationResult.fail(f"{config.clone_path} already exists")

    result = run_commands(
        [["git", "clone", "-b", config.branch, get_repo_url(), config.directory]],
        cwd=config.clone_path.parent,
    )
    if not result.success:
        return result

    enter_directory(config.clone_path)
    return OperationResult.ok(str(config.clone_path))


def prepare_checkout(context: PrepareContext) -> Dict[str, Any]:
    branch = context.value(
        "branch", "What branch would you like to checkout?", default=get_default_branch()
    )
    return {"branch": branch}


def checkout(config: RunConfig) -> OperationResult:
    """Fetch and check out the configured branch in the current checkout."""
    if not config.branch:
        return OperationResult.fail("checkout requires a branch")
    checkout_dir = enter_directory(resolve_checkout(config))
    return run_commands(
        [["git", "fetch", "origin"], ["git", "checkout", config.branch]],
        cwd=checkout_dir,
    )


def stash(config: RunConfig) -> OperationResult:
    """Stash uncommitted changes in the checkout."""
    return run_commands([["git", "stash"]], cwd=resolve_checkout(config))


def current_branch(cwd: Path) -> str:
    """Return the branch checked out in ``cwd``.

    Raises:
        CommandError: If git fails or HEAD is detached
    """
    branch = capture_stdout(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=cwd)
    if not branch or branch == "HEAD":
        raise CommandError("git rev-parse --abbrev-ref HEAD", stderr="HEAD is detached")
    return branch


def push(config: RunConfig) -> OperationResult:
    """Push the current branch to origin, setting the upstream."""
    checkout_dir = resolve_checkout(config)
    try:
        branch = current_branch(checkout_dir)
    except CommandError as e:
        return OperationResult.fail(str(e))
    logger.debug("Detected current branch %s", branch)
    return run_commands([["git", "push", "-u", "origin", branch]], cwd=checkout_dir)


def get_git_operations():
    """Return the version control operations in registration order."""
    return {
        "clone": operation(
            "clone",
            clone,
            prepare=prepare_clone,
            description="Clone the repository into a directory named after the branch",
        ),
        "checkout": operation(
            "checkout",
            checkout,
            flags=["c"],
            prepare=prepare_checkout,
            description="Fetch origin and check out a branch",
        ),
        "stash": operation("stash", stash, description="Stash uncommitted changes"),
        "push": operation(
            "push", push, description="Push the current branch to origin with upstream tracking"
        ),
    }
