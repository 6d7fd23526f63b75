"""Data models for barrelify.

This module defines the immutable dataclasses passed between the classifier,
the renderer and the orchestrator while a single directory is processed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from barrelify.config.models import ExcludeConfig


class ExportMode(str, Enum):
    """Enumeration for barrel rendering modes."""

    NAMED = "named"
    WILDCARD = "wildcard"


@dataclass(slots=True, frozen=True)
class ExportSet:
    """Classified exports of one module.

    ``named`` and ``types`` keep declaration order and never share an
    identifier.
    """

    named: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    has_default: bool = False

    @property
    def is_empty(self) -> bool:
        """True when the module exports nothing the renderer can use."""
        return not self.named and not self.types and not self.has_default


class ExportSetBuilder:
    """Accumulates identifiers while a syntax tree is walked.

    A name declared both as a value and as a type is kept as a value only,
    since a value re-export also carries the type meaning.
    """

    def __init__(self) -> None:
        self._named: dict[str, None] = {}
        self._types: dict[str, None] = {}
        self._has_default: bool = False

    def add_named(self, name: str) -> None:
        _ = self._types.pop(name, None)
        self._named.setdefault(name, None)

    def add_type(self, name: str) -> None:
        if name not in self._named:
            self._types.setdefault(name, None)

    def mark_default(self) -> None:
        self._has_default = True

    def build(self) -> ExportSet:
        return ExportSet(
            named=tuple(self._named),
            types=tuple(self._types),
            has_default=self._has_default,
        )


@dataclass(slots=True, frozen=True)
class DirectoryScan:
    """Snapshot of one directory listing after filtering.

    ``subdirectories`` drives recursion; ``barrel_candidates`` are the
    subdirectories considered for re-export lines and is empty when
    subdirectory barrels are disabled.
    """

    path: Path
    config: ExcludeConfig
    files: tuple[str, ...]
    subdirectories: tuple[str, ...]
    barrel_candidates: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.files and not self.barrel_candidates


@dataclass(slots=True, frozen=True)
class BarrelPlan:
    """Ordered re-export statements for one directory.

    Subdirectory lines come first, then per-file lines in listing order.
    """

    lines: tuple[str, ...]
    file_count: int
    subdirectory_count: int

    @property
    def export_count(self) -> int:
        """Number of re-export sources contributing to the barrel."""
        return self.file_count + self.subdirectory_count

    def render(self) -> str:
        """Return the barrel file content with a trailing newline."""
        return "\n".join(self.lines) + "\n"


@dataclass(slots=True, frozen=True)
class DirectoryResult:
    """Outcome of processing one directory."""

    path: Path
    output_path: Path
    written: bool
    export_count: int = 0
    content: str | None = field(default=None, repr=False)
