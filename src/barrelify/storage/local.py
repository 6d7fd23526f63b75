"""Directory store backed by the local filesystem."""

from __future__ import annotations

from pathlib import Path


class FileSystemStore:
    """Real-disk implementation of the directory store protocol.

    Symbolic links are followed for type checks, so a link to a source file
    counts as a source file and a link to a directory as a directory. Broken
    links are neither. ``is_symlink`` lets callers refuse to descend into
    linked directories.
    """

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError:
            return False

    def is_file(self, path: Path) -> bool:
        try:
            return path.is_file()
        except OSError:
            return False

    def is_symlink(self, path: Path) -> bool:
        try:
            return path.is_symlink()
        except OSError:
            return False

    def list_dir(self, path: Path) -> list[str]:
        return sorted(entry.name for entry in path.iterdir())

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        # newline="" keeps "\n" on every platform
        _ = path.write_text(content, encoding="utf-8", newline="")
