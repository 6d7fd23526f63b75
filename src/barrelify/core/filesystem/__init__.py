"""Filesystem-facing building blocks: exclusions, scanning and traversal."""

from __future__ import annotations

from .exclusions import ExclusionFilter, GlobPattern, matches
from .scanner import DirectoryScanner
from .walker import walk_post_order

__all__ = [
    "DirectoryScanner",
    "ExclusionFilter",
    "GlobPattern",
    "matches",
    "walk_post_order",
]
