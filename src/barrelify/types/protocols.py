"""Protocol definitions for component interfaces.

This module defines structural subtyping protocols that establish
contracts for collaborators without requiring inheritance.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class DirectoryStore(Protocol):
    """Protocol for the storage collaborator behind the orchestrator.

    All filesystem access of the generator goes through this interface.
    A child directory's output file doubles as its completion marker, which
    the parent consults through ``is_file``.
    """

    def exists(self, path: Path) -> bool:
        """Return True if anything exists at ``path``."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Return True if ``path`` is a directory."""
        ...

    def is_file(self, path: Path) -> bool:
        """Return True if ``path`` is a regular file."""
        ...

    def is_symlink(self, path: Path) -> bool:
        """Return True if ``path`` itself is a symbolic link."""
        ...

    def list_dir(self, path: Path) -> list[str]:
        """List entry names of a directory, sorted by name.

        Raises:
            OSError: If the directory cannot be listed
        """
        ...

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the content is not valid UTF-8
        """
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Create or overwrite a text file with ``content``."""
        ...
