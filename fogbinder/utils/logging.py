"""Logging setup for Fogbinder.

All package loggers hang off the ``"fogbinder"`` logger. Console output
goes through Rich on stderr, leaving stdout to command output (reports,
JSON, SVG). An optional log file receives every record.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


ROOT_LOGGER = "fogbinder"

# Shared by the CLI's error messages and the log handler
console = Console(stderr=True)

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
RICH_FORMAT = "%(message)s"


def _console_handler(rich_output: bool) -> logging.Handler:
    if not rich_output:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(FILE_FORMAT))
        return handler

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(RICH_FORMAT))
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    handler.setLevel(logging.DEBUG)
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    rich_output: bool = True,
) -> logging.Logger:
    """
    Configure the package logger.

    Calling it again replaces the previous handlers, so the CLI can
    reconfigure per invocation.

    Args:
        level: Console log level name; unknown names fall back to INFO
        log_file: Optional path that receives all records
        rich_output: Rich console handler when True, plain stderr otherwise

    Returns:
        The ``fogbinder`` logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()

    console_handler = _console_handler(rich_output)
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    if log_file:
        logger.addHandler(_file_handler(Path(log_file)))
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(log_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)
