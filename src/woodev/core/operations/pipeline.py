"""Pipeline orchestrator for operation execution."""

import logging
import time
from enum import Enum
from typing import List, Optional

from woodev.core.config import RunConfig
from woodev.core.operations.base import HookFn, OperationDescriptor
from woodev.core.operations.types import OperationResult
from woodev.core.prompts import PrepareContext

logger = logging.getLogger(__name__)


class RunState(str, Enum):
    """Lifecycle of a single pipeline run."""

    PENDING = "pending"
    PREPARING = "preparing"
    EXECUTING = "executing"
    COMPLETED = "completed"
    FAILED = "failed"


class OperationRunner:
    """Runs selected operations in two strictly separated phases.

    Every preparation step runs first and is merged into one RunConfig.
    Actions then run in order; the first failure aborts the run and the
    deferred after-all hooks only fire once every action has succeeded.
    """

    def __init__(self, operations: List[OperationDescriptor]) -> None:
        """Initialize the runner with the selected operations.

        Args:
            operations: Operations in execution order
        """
        self._operations = operations
        self.state = RunState.PENDING
        self.config = RunConfig()
        self.failed_operation: Optional[str] = None

    @property
    def operations(self) -> List[OperationDescriptor]:
        return list(self._operations)

    def prepare(self, context: PrepareContext) -> RunConfig:
        """Run every preparation step and accumulate the configuration.

        Args:
            context: Command-line values and the prompter

        Returns:
            The merged RunConfig

        Raises:
            ConfigError: If a preparation step returns invalid configuration
        """
        self.state = RunState.PREPARING
        config = RunConfig()
        for op in self._operations:
            if op.prepare is None:
                continue
            logger.debug("Preparing %s", op.name, extra={"operation": op.name})
            patch = op.prepare(context) or {}
            config = config.merge(patch, source=op.name)
        self.config = config
        return config

    def execute(self, config: RunConfig) -> bool:
        """Run every action against ``config``, stopping at the first failure.

        Args:
            config: Configuration produced by the preparation phase

        Returns:
            True if every action and hook completed, False if an action failed
        """
        self.state = RunState.EXECUTING
        deferred: List[HookFn] = []

        for op in self._operations:
            started = time.perf_counter()
            result = self._run_action(op, config)

            if not result.success:
                message = f"Unable to run operation {op.name}"
                if result.error:
                    message += f": {result.error}"
                logger.warning(message, extra={"operation": op.name})
                self.state = RunState.FAILED
                self.failed_operation = op.name
                return False

            op.report_success(config)
            elapsed = time.perf_counter() - started
            logger.info("Finished in %.2fs", elapsed, extra={"operation": op.name})

            if op.on_all_complete is not None:
                deferred.append(op.on_all_complete)

        for hook in deferred:
            hook(config)

        self.state = RunState.COMPLETED
        return True

    def run(self, context: PrepareContext) -> bool:
        """Prepare and then execute the selected operations."""
        config = self.prepare(context)
        return self.execute(config)

    def _run_action(self, op: OperationDescriptor, config: RunConfig) -> OperationResult:
        try:
            result = op.action(config)
        except Exception as e:
            logger.debug("Operation %s raised", op.name, exc_info=True)
            return OperationResult.fail(f"{type(e).__name__}: {e}")
        if result is None:
            return OperationResult.ok(None)
        return result
