"""Barrel statement rendering."""

from __future__ import annotations

from .renderer import (
    build_plan,
    module_name,
    render_module,
    render_subdirectory,
    wildcard_line,
)

__all__ = [
    "build_plan",
    "module_name",
    "render_module",
    "render_subdirectory",
    "wildcard_line",
]
