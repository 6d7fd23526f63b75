"""Rendering of re-export statements for barrel files.

All functions here are pure: the same classified inputs, mode and output
dialect always produce the same lines in the same order.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import PurePosixPath

from barrelify.types.models import BarrelPlan, ExportMode, ExportSet


def module_name(filename: str) -> str:
    """Return the import name of a source file: its name minus the last extension.

    Example:
        >>> module_name("Button.test.tsx")
        'Button.test'
    """
    return PurePosixPath(filename).stem


def _specifier(name: str) -> str:
    return f"'./{name}'"


def wildcard_line(name: str) -> str:
    return f"export * from {_specifier(name)};"


def _type_wildcard_line(name: str) -> str:
    return f"export type * from {_specifier(name)};"


def _named_line(identifiers: Sequence[str], name: str, *, type_only: bool = False) -> str:
    keyword = "export type" if type_only else "export"
    return f"{keyword} {{ {', '.join(identifiers)} }} from {_specifier(name)};"


def _default_line(name: str) -> str:
    return f"export {{ default as {name} }} from {_specifier(name)};"


def render_subdirectory(name: str) -> str:
    """Render the re-export of a subdirectory that has its own barrel."""
    return wildcard_line(name)


def render_module(
    name: str,
    exports: ExportSet | None,
    mode: ExportMode,
    typed_output: bool,
) -> list[str]:
    """Render the re-export lines for one module.

    Args:
        name: Module name (file name without extension)
        exports: Classified exports, or None when classification failed
        mode: Named or wildcard rendering
        typed_output: Whether the barrel can express type-only exports

    Returns:
        Zero or more statement lines. A failed classification always renders
        one wildcard line; a module without exports renders none.
    """
    if exports is None:
        return [wildcard_line(name)]

    if mode is ExportMode.WILDCARD:
        return _render_wildcard(name, exports, typed_output)
    return _render_named(name, exports, typed_output)


def _render_wildcard(name: str, exports: ExportSet, typed_output: bool) -> list[str]:
    lines: list[str] = []
    has_values = bool(exports.named) or exports.has_default

    if has_values:
        lines.append(wildcard_line(name))
    if exports.types:
        if typed_output:
            lines.append(_type_wildcard_line(name))
        elif not has_values:
            # Untyped barrels carry types through the value re-export
            lines.append(wildcard_line(name))

    return lines


def _render_named(name: str, exports: ExportSet, typed_output: bool) -> list[str]:
    lines: list[str] = []

    if exports.named:
        lines.append(_named_line(exports.named, name))
    if exports.types:
        lines.append(_named_line(exports.types, name, type_only=typed_output))
    if exports.has_default:
        lines.append(_default_line(name))

    return lines


def build_plan(
    subdirectories: Sequence[str],
    modules: Sequence[tuple[str, ExportSet | None]],
    *,
    mode: ExportMode,
    typed_output: bool,
) -> BarrelPlan:
    """Assemble the barrel for one directory.

    Args:
        subdirectories: Subdirectory names whose barrel already exists, in listing order
        modules: ``(file name, exports)`` pairs in listing order
        mode: Named or wildcard rendering
        typed_output: Whether the barrel can express type-only exports

    Returns:
        Plan with subdirectory lines first, then per-module lines
    """
    lines = [render_subdirectory(subdirectory) for subdirectory in subdirectories]
    for filename, exports in modules:
        lines.extend(render_module(module_name(filename), exports, mode, typed_output))

    return BarrelPlan(
        lines=tuple(lines),
        file_count=len(modules),
        subdirectory_count=len(subdirectories),
    )
