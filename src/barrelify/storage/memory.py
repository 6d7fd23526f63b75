"""In-memory directory store for exercising the generator without disk I/O."""

from __future__ import annotations

from pathlib import Path


class InMemoryStore:
    """Dictionary-backed directory tree implementing the store protocol.

    Files hold either text or raw bytes; bytes are decoded as UTF-8 on read,
    so undecodable content can be modelled. Every write is recorded in
    ``writes`` in the order it happened. Symbolic links are entries that
    resolve to another path for every operation except ``is_symlink``.
    """

    def __init__(self) -> None:
        self._directories: set[Path] = set()
        self._files: dict[Path, str | bytes] = {}
        self._links: dict[Path, Path] = {}
        self.writes: list[Path] = []

    def add_directory(self, path: Path | str) -> Path:
        """Create a directory and any missing parents."""
        directory = Path(path)
        if directory in self._files:
            msg = f"A file already exists at {directory}"
            raise FileExistsError(msg)
        self._directories.add(directory)
        self._directories.update(directory.parents)
        return directory

    def add_file(self, path: Path | str, content: str | bytes = "") -> Path:
        """Create or replace a file, creating missing parent directories."""
        file_path = Path(path)
        if file_path in self._directories:
            msg = f"A directory already exists at {file_path}"
            raise IsADirectoryError(msg)
        _ = self.add_directory(file_path.parent)
        self._files[file_path] = content
        return file_path

    def add_symlink(self, path: Path | str, target: Path | str) -> Path:
        """Create a link at ``path`` pointing to ``target``."""
        link = Path(path)
        if self.exists(link):
            msg = f"An entry already exists at {link}"
            raise FileExistsError(msg)
        _ = self.add_directory(link.parent)
        self._links[link] = Path(target)
        return link

    def _resolve(self, path: Path) -> Path:
        seen: set[Path] = set()
        while path in self._links and path not in seen:
            seen.add(path)
            path = self._links[path]
        return path

    def exists(self, path: Path) -> bool:
        resolved = self._resolve(path)
        return resolved in self._directories or resolved in self._files

    def is_dir(self, path: Path) -> bool:
        return self._resolve(path) in self._directories

    def is_file(self, path: Path) -> bool:
        return self._resolve(path) in self._files

    def is_symlink(self, path: Path) -> bool:
        return path in self._links

    def list_dir(self, path: Path) -> list[str]:
        path = self._resolve(path)
        if path in self._files:
            raise NotADirectoryError(str(path))
        if path not in self._directories:
            raise FileNotFoundError(str(path))

        names = {entry.name for entry in self._directories if entry.parent == path and entry != path}
        names.update(entry.name for entry in self._files if entry.parent == path)
        names.update(entry.name for entry in self._links if entry.parent == path)
        return sorted(names)

    def read_text(self, path: Path) -> str:
        path = self._resolve(path)
        if path in self._directories:
            raise IsADirectoryError(str(path))
        try:
            content = self._files[path]
        except KeyError:
            raise FileNotFoundError(str(path)) from None
        if isinstance(content, bytes):
            return content.decode("utf-8")
        return content

    def write_text(self, path: Path, content: str) -> None:
        if path.parent not in self._directories:
            raise FileNotFoundError(str(path.parent))
        _ = self.add_file(path, content)
        self.writes.append(path)
