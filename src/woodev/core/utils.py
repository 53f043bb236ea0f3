"""Logging setup for the woodev CLI."""

import logging
import os
import sys
from logging import Handler
from typing import Dict

import typer

from woodev.core.paths import WoodevPaths

LOGGER_NAME = "woodev"
DEFAULT_PREFIX = "woo"

_LEVEL_COLORS: Dict[int, str] = {
    logging.DEBUG: typer.colors.BRIGHT_BLACK,
    logging.INFO: typer.colors.CYAN,
    logging.WARNING: typer.colors.YELLOW,
    logging.ERROR: typer.colors.RED,
    logging.CRITICAL: typer.colors.RED,
}


def _get_log_level() -> int:
    """Get console log level from WOODEV_LOG_LEVEL, defaulting to INFO."""
    level_str = os.environ.get("WOODEV_LOG_LEVEL", "INFO").upper()
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
    }
    return level_map.get(level_str, logging.INFO)


class PrefixFormatter(logging.Formatter):
    """Render records as ``<prefix> | message`` with a level-colored prefix.

    The prefix is the ``operation`` attribute of the record when the
    pipeline supplies one, otherwise ``woo``.
    """

    def __init__(self, color: bool = True) -> None:
        super().__init__("%(message)s")
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        prefix = getattr(record, "operation", DEFAULT_PREFIX)
        separator = "|"
        if self.color:
            prefix = typer.style(prefix, fg=_LEVEL_COLORS.get(record.levelno), bold=True)
            separator = typer.style(separator, fg=typer.colors.WHITE)
        return f"{prefix} {separator} {message}"


def setup_logger(quiet: bool = False, log_to_file: bool = True) -> logging.Logger:
    """Configure the woodev logger for a CLI run.

    Console output level is read from WOODEV_LOG_LEVEL. The log file under
    the woodev data directory always captures DEBUG.

    Args:
        quiet: If True, suppress console output entirely
        log_to_file: If True, also write to ``<data dir>/logs/woodev.log``

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    if log_to_file:
        WoodevPaths.ensure_directories()
        file_handler: Handler = logging.FileHandler(
            WoodevPaths.get_logs_dir() / "woodev.log", mode="a"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(_get_log_level())
        console_handler.setFormatter(PrefixFormatter(color=sys.stderr.isatty()))
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug("Woodev logger initialized (quiet=%s)", quiet)
    return logger
