"""PHP unit test operations.

The test operations depend on a running test environment. Instead of looking
each other up in the registry, they receive the readiness check as a callable
so tests and alternative environments can swap it out.
"""

import logging
from typing import Any, Callable, Dict, List

from woodev.core.config import RunConfig
from woodev.core.errors import CommandError
from woodev.core.operations.base import operation
from woodev.core.operations.types import OperationResult
from woodev.core.paths import resolve_checkout
from woodev.core.prompts import PrepareContext
from woodev.core.shell import capture_stdout, run_commands

logger = logging.getLogger(__name__)

PNPM_FILTER = "--filter=@woocommerce/plugin-woocommerce"
TEST_CONTAINER_MARKER = "tests-wordpress"

EnsureReady = Callable[[RunConfig], OperationResult]


def is_php_test_env_ready() -> bool:
    """Check whether the PHP test containers are running.

    Returns:
        True if a test WordPress container is up, False otherwise (including
        when docker itself is unavailable)
    """
    try:
        names = capture_stdout(["docker", "ps", "--format", "{{.Names}}"])
    except CommandError as e:
        logger.debug("Could not list containers: %s", e)
        return False
    return any(TEST_CONTAINER_MARKER in name for name in names.splitlines())


def ensure_php_test_env(config: RunConfig) -> OperationResult:
    """Start the PHP test environment unless it is already running."""
    if is_php_test_env_ready():
        logger.debug("PHP test environment already running")
        return OperationResult.ok(None, started=False)
    result = run_commands([["pnpm", PNPM_FILTER, "env:test"]], cwd=resolve_checkout(config))
    if result.success:
        result.metadata["started"] = True
    return result


def prepare_test_filter(context: PrepareContext) -> Dict[str, Any]:
    return {"test_filter": context.option("test_filter")}


def phpunit_command(config: RunConfig, *extra: str) -> List[str]:
    """Build the pnpm command running PHPUnit with optional extra arguments."""
    args = list(extra)
    if config.test_filter:
        args.extend(["--filter", config.test_filter])
    command = ["pnpm", PNPM_FILTER, "test:php"]
    if args:
        command.append("--")
        command.extend(args)
    return command


def make_php_test_operations(ensure_ready: EnsureReady = ensure_php_test_env):
    """Build the PHP test operations around a readiness check.

    Args:
        ensure_ready: Idempotent check that brings the test environment up

    Returns:
        Dict of operation name to descriptor, in registration order
    """

    def prepare_env(config: RunConfig) -> OperationResult:
        return ensure_ready(config)

    def run_tests(config: RunConfig) -> OperationResult:
        ready = ensure_ready(config)
        if not ready.success:
            return ready
        return run_commands([phpunit_command(config)], cwd=resolve_checkout(config))

    def run_failing_tests(config: RunConfig) -> OperationResult:
        ready = ensure_ready(config)
        if not ready.success:
            return ready
        command = phpunit_command(
            config, "--cache-result", "--order-by=defects", "--stop-on-defect"
        )
        return run_commands([command], cwd=resolve_checkout(config))

    return {
        "test:php:prepare": operation(
            "test:php:prepare",
            prepare_env,
            description="Start the PHP test environment if it is not running",
        ),
        "test:php": operation(
            "test:php",
            run_tests,
            flags=["t"],
            prepare=prepare_test_filter,
            description="Run the PHP unit tests",
        ),
        "test:php:failing": operation(
            "test:php:failing",
            run_failing_tests,
            flags=["f"],
            prepare=prepare_test_filter,
            description="Re-run previously failing PHP tests first, stopping on the first defect",
        ),
    }
