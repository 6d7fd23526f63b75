"""Shared utilities."""

from barrelify.utils.logging import (
    DirectoryContextFilter,
    configure_logging,
    directory_context,
    get_current_directory,
)

__all__ = [
    "DirectoryContextFilter",
    "configure_logging",
    "directory_context",
    "get_current_directory",
]
