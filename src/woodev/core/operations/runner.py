"""Main entry point for running operations.

This module provides the public API used by the CLI: select operations from
a registry, then prepare and execute them.
"""

import logging
from typing import Iterable, Optional

from woodev.core.operations.pipeline import OperationRunner
from woodev.core.operations.registry import OperationRegistry
from woodev.core.operations.selection import resolve_selection
from woodev.core.prompts import PrepareContext

logger = logging.getLogger(__name__)


def execute_operations(
    registry: OperationRegistry,
    name: Optional[str],
    flags: Iterable[str],
    context: PrepareContext,
) -> bool:
    """Select and run operations.

    Args:
        registry: The operation registry
        name: Operation named explicitly, if any
        flags: Short flags supplied on the command line
        context: Command-line values and prompter for preparation steps

    Returns:
        True on success or when nothing was selected, False if an action failed

    Raises:
        SelectionError: If ``name`` is not a registered operation
        ConfigError: If a preparation step produced invalid configuration
    """
    selected = resolve_selection(registry, name, flags)
    if not selected:
        logger.warning("Nothing to do")
        return True

    logger.debug("Running operations: %s", ", ".join(op.name for op in selected))
    runner = OperationRunner(selected)
    return runner.run(context)
