"""Subprocess helpers shared by the operation catalog."""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from woodev.core.errors import CommandError
from woodev.core.operations.types import OperationResult

logger = logging.getLogger(__name__)

Command = Sequence[str]


def format_command(args: Command) -> str:
    """Return a shell-style rendering of ``args`` for log output."""
    return shlex.join(args)


def run_command(
    args: Command,
    cwd: Optional[Union[str, Path]] = None,
    capture_output: bool = False,
) -> subprocess.CompletedProcess:
    """Run an external command and wait for it to finish.

    Output is inherited from the terminal unless ``capture_output`` is set,
    in which case stdout and stderr are returned as text.

    Args:
        args: Program and arguments
        cwd: Directory to run in, defaults to the current directory
        capture_output: Whether to capture output instead of streaming it

    Returns:
        The completed process

    Raises:
        CommandError: If the program is missing or exits nonzero
    """
    rendered = format_command(args)
    if cwd is None:
        logger.info("$ %s", rendered)
    else:
        logger.info("$ %s (cwd=%s)", rendered, cwd)

    try:
        result = subprocess.run(
            list(args),
            capture_output=capture_output,
            text=True,
            cwd=cwd,
        )
    except FileNotFoundError as e:
        raise CommandError(
            rendered, stderr=f"{args[0]} not found - ensure it is installed and in PATH"
        ) from e

    if result.returncode != 0:
        raise CommandError(rendered, result.returncode, result.stderr if capture_output else None)
    return result


def capture_stdout(args: Command, cwd: Optional[Union[str, Path]] = None) -> str:
    """Run a command and return its stripped standard output."""
    return run_command(args, cwd=cwd, capture_output=True).stdout.strip()


def run_commands(
    commands: List[Command],
    cwd: Optional[Union[str, Path]] = None,
) -> OperationResult:
    """Run commands in order, stopping at the first failure.

    Args:
        commands: Commands to execute
        cwd: Directory to run them in

    Returns:
        OperationResult that is successful only if every command succeeded
    """
    for args in commands:
        try:
            run_command(args, cwd=cwd)
        except CommandError as e:
            logger.debug("Command failed: %s", e)
            return OperationResult.fail(str(e), command=e.command)
    return OperationResult.ok(None, commands=len(commands))
