"""Type definitions and protocols for barrelify.

This package provides:
- Data models (immutable dataclasses)
- Protocol definitions (structural subtyping interfaces)
"""

from barrelify.types.models import (
    BarrelPlan,
    DirectoryResult,
    DirectoryScan,
    ExportMode,
    ExportSet,
    ExportSetBuilder,
)
from barrelify.types.protocols import DirectoryStore

__all__ = [
    # Data models
    "BarrelPlan",
    "DirectoryResult",
    "DirectoryScan",
    "ExportMode",
    "ExportSet",
    "ExportSetBuilder",
    # Protocols
    "DirectoryStore",
]
