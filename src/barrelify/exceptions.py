"""Exception hierarchy shared across barrelify."""

from __future__ import annotations

from pathlib import Path


class BarrelifyError(Exception):
    """Base exception for all barrelify errors."""


class TargetDirectoryError(BarrelifyError):
    """Raised when the directory to process is unusable.

    This is the only fatal error class: it stops the whole invocation.
    """

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path: Path = path


class TargetNotFoundError(TargetDirectoryError):
    """Raised when the target directory does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f'Directory "{path}" does not exist', path)


class TargetNotDirectoryError(TargetDirectoryError):
    """Raised when the target path exists but is not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f'"{path}" is not a directory', path)


class SourceParseError(BarrelifyError):
    """Raised by a classifier when a source file has syntax errors."""

    def __init__(self, filename: str, detail: str | None = None) -> None:
        message = f"Could not parse {filename}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.filename: str = filename
        self.detail: str | None = detail
