"""Tests for barrel statement rendering."""

from __future__ import annotations

import pytest

from barrelify.core.rendering.renderer import (
    build_plan,
    module_name,
    render_module,
    render_subdirectory,
)
from barrelify.types.models import ExportMode, ExportSet

FULL = ExportSet(named=("Button", "useButton"), types=("ButtonProps",), has_default=True)
TYPES_ONLY = ExportSet(types=("ModalProps", "ModalSize"))
DEFAULT_ONLY = ExportSet(has_default=True)


class TestModuleName:
    """Test module name derivation."""

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("Button.tsx", "Button"),
            ("utils.ts", "utils"),
            ("Button.test.tsx", "Button.test"),
            ("env.d.ts", "env.d"),
        ],
    )
    def test_strips_last_extension(self, filename: str, expected: str) -> None:
        """Test that only the final extension is removed."""
        assert module_name(filename) == expected


class TestNamedMode:
    """Test named re-export rendering."""

    def test_typed_output(self) -> None:
        """Test values, type-only list and default alias for a typed barrel."""
        lines = render_module("Button", FULL, ExportMode.NAMED, typed_output=True)

        assert lines == [
            "export { Button, useButton } from './Button';",
            "export type { ButtonProps } from './Button';",
            "export { default as Button } from './Button';",
        ]

    def test_untyped_output_merges_types(self) -> None:
        """Test that an untyped barrel lists types as ordinary exports."""
        lines = render_module("Button", FULL, ExportMode.NAMED, typed_output=False)

        assert lines == [
            "export { Button, useButton } from './Button';",
            "export { ButtonProps } from './Button';",
            "export { default as Button } from './Button';",
        ]

    def test_types_only_module(self) -> None:
        """Test a module exporting only types."""
        lines = render_module("Modal", TYPES_ONLY, ExportMode.NAMED, typed_output=True)

        assert lines == ["export type { ModalProps, ModalSize } from './Modal';"]

    def test_default_only_module(self) -> None:
        """Test a module exporting only a default binding."""
        lines = render_module("App", DEFAULT_ONLY, ExportMode.NAMED, typed_output=True)

        assert lines == ["export { default as App } from './App';"]


class TestWildcardMode:
    """Test wildcard re-export rendering."""

    def test_typed_output_adds_type_wildcard(self) -> None:
        """Test that a typed barrel carries types with a type-only wildcard."""
        lines = render_module("Button", FULL, ExportMode.WILDCARD, typed_output=True)

        assert lines == [
            "export * from './Button';",
            "export type * from './Button';",
        ]

    def test_untyped_output_has_single_wildcard(self) -> None:
        """Test that values and types share one wildcard in an untyped barrel."""
        lines = render_module("Button", FULL, ExportMode.WILDCARD, typed_output=False)

        assert lines == ["export * from './Button';"]

    def test_types_only_untyped(self) -> None:
        """Test that a types-only module still gets a wildcard in an untyped barrel."""
        lines = render_module("Modal", TYPES_ONLY, ExportMode.WILDCARD, typed_output=False)

        assert lines == ["export * from './Modal';"]

    def test_types_only_typed(self) -> None:
        """Test that a types-only module gets only the type wildcard in a typed barrel."""
        lines = render_module("Modal", TYPES_ONLY, ExportMode.WILDCARD, typed_output=True)

        assert lines == ["export type * from './Modal';"]

    def test_default_only(self) -> None:
        """Test that a default export alone triggers the value wildcard."""
        lines = render_module("App", DEFAULT_ONLY, ExportMode.WILDCARD, typed_output=True)

        assert lines == ["export * from './App';"]


class TestFallbackAndEmpty:
    """Test unclassified and empty modules."""

    @pytest.mark.parametrize("mode", list(ExportMode))
    @pytest.mark.parametrize("typed_output", [True, False])
    def test_unclassified_module_gets_wildcard(self, mode: ExportMode, typed_output: bool) -> None:
        """Test that a failed classification always renders one wildcard."""
        assert render_module("broken", None, mode, typed_output) == ["export * from './broken';"]

    @pytest.mark.parametrize("mode", list(ExportMode))
    @pytest.mark.parametrize("typed_output", [True, False])
    def test_empty_module_renders_nothing(self, mode: ExportMode, typed_output: bool) -> None:
        """Test that a module without exports is skipped silently."""
        assert render_module("constants", ExportSet(), mode, typed_output) == []


class TestBuildPlan:
    """Test barrel assembly for a directory."""

    def test_subdirectories_come_first(self) -> None:
        """Test statement ordering and counts."""
        plan = build_plan(
            ["forms", "layout"],
            [("Button.tsx", FULL), ("constants.ts", ExportSet()), ("legacy.js", None)],
            mode=ExportMode.NAMED,
            typed_output=True,
        )

        assert plan.lines == (
            "export * from './forms';",
            "export * from './layout';",
            "export { Button, useButton } from './Button';",
            "export type { ButtonProps } from './Button';",
            "export { default as Button } from './Button';",
            "export * from './legacy';",
        )
        assert plan.subdirectory_count == 2
        assert plan.file_count == 3
        assert plan.export_count == 5

    def test_render_has_trailing_newline(self) -> None:
        """Test the rendered file content."""
        plan = build_plan(["ui"], [("a.ts", None)], mode=ExportMode.NAMED, typed_output=True)

        assert plan.render() == "export * from './ui';\nexport * from './a';\n"

    def test_render_subdirectory(self) -> None:
        """Test the subdirectory re-export statement."""
        assert render_subdirectory("forms") == "export * from './forms';"
