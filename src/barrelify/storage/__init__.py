"""Storage collaborators implementing the directory store protocol."""

from __future__ import annotations

from .local import FileSystemStore
from .memory import InMemoryStore

__all__ = [
    "FileSystemStore",
    "InMemoryStore",
]
