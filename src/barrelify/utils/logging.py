"""Logging setup with per-directory context.

Diagnostics (warnings about unreadable configuration, unparseable files,
empty directories) go to stderr through the standard logging module; stdout
is left for results. A ContextVar holds the directory currently being
processed and a filter stamps it on every record, so messages emitted deep
inside the classifier or the config loader can still be traced back to the
directory visit that caused them.
"""

from __future__ import annotations

import contextvars
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Final, TextIO, override

current_directory_var: contextvars.ContextVar[Path | None] = contextvars.ContextVar(
    "current_directory",
    default=None,
)

DEFAULT_LOG_FORMAT: Final[str] = "%(levelname)s: %(message)s"

DEBUG_LOG_FORMAT: Final[str] = "%(levelname)s - [%(directory)s] - %(name)s - %(message)s"

NO_DIRECTORY: Final[str] = "-"


class DirectoryContextFilter(logging.Filter):
    """Logging filter that adds the directory being processed to log records."""

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        """Add the current directory to the log record.

        Args:
            record: Log record to enhance

        Returns:
            True to allow the record to be logged
        """
        directory = get_current_directory()
        record.directory = str(directory) if directory is not None else NO_DIRECTORY
        return True


def configure_logging(
    *,
    log_level: str = "WARNING",
    enable_console: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        enable_console: Enable the console handler
        stream: Stream for the console handler (default: stderr)

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> logging.getLogger(__name__).debug("Scanning")
    """
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.WARNING)
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        log_format = DEBUG_LOG_FORMAT if level <= logging.DEBUG else DEFAULT_LOG_FORMAT
        console_handler.setFormatter(logging.Formatter(log_format))
        console_handler.addFilter(DirectoryContextFilter())
        root_logger.addHandler(console_handler)


def get_current_directory() -> Path | None:
    """Return the directory currently being processed, if any."""
    return current_directory_var.get()


@contextmanager
def directory_context(directory: Path) -> Iterator[Path]:
    """Mark ``directory`` as the one being processed for the enclosed block.

    Example:
        >>> with directory_context(Path("src/components")):
        ...     logger.warning("No exports")  # record.directory == "src/components"
    """
    token = current_directory_var.set(directory)
    try:
        yield directory
    finally:
        current_directory_var.reset(token)
