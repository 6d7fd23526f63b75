"""Test suite for the directory scanner."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from barrelify.config.models import GeneratorSettings
from barrelify.core.filesystem.scanner import DirectoryScanner
from barrelify.storage.memory import InMemoryStore

SOURCE_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")


def make_scanner(store: InMemoryStore, **settings: object) -> DirectoryScanner:
    return DirectoryScanner(store, GeneratorSettings.model_validate(settings), SOURCE_EXTENSIONS)


class TestDirectoryScanner:
    """Test DirectoryScanner partitioning."""

    def test_partitions_files_and_subdirectories(self, memory_store: InMemoryStore, project_root: Path) -> None:
        """Test that source files and subdirectories are separated."""
        _ = memory_store.add_file(project_root / "b.ts")
        _ = memory_store.add_file(project_root / "a.jsx")
        _ = memory_store.add_file(project_root / "README.md")
        _ = memory_store.add_directory(project_root / "nested")

        scan = make_scanner(memory_store).scan(project_root)

        assert scan.path == project_root
        assert scan.files == ("a.jsx", "b.ts")
        assert scan.subdirectories == ("nested",)
        assert scan.barrel_candidates == ("nested",)
        assert not scan.is_empty

    def test_output_file_is_never_a_source(self, memory_store: InMemoryStore, project_root: Path) -> None:
        """Test that an existing barrel is not re-exported from itself."""
        _ = memory_store.add_file(project_root / "index.ts")
        _ = memory_store.add_file(project_root / "a.ts")

        scan = make_scanner(memory_store).scan(project_root)

        assert scan.files == ("a.ts",)

    def test_custom_output_file_is_skipped(self, memory_store: InMemoryStore, project_root: Path) -> None:
        """Test that only the configured output name is skipped."""
        _ = memory_store.add_file(project_root / "index.ts")
        _ = memory_store.add_file(project_root / "index.js")

        scan = make_scanner(memory_store, output_file="index.js").scan(project_root)

        assert scan.files == ("index.ts",)

    def test_directory_with_source_suffix_is_subdirectory(
        self, memory_store: InMemoryStore, project_root: Path
    ) -> None:
        """Test that a directory named like a source file is not a source file."""
        _ = memory_store.add_directory(project_root / "legacy.js")

        scan = make_scanner(memory_store).scan(project_root)

        assert scan.files == ()
        assert scan.subdirectories == ("legacy.js",)

    def test_excludes_apply_to_files_and_subdirectories(
        self, memory_store: InMemoryStore, project_root: Path
    ) -> None:
        """Test that sidecar patterns filter both partitions."""
        _ = memory_store.add_file(project_root / "a.ts")
        _ = memory_store.add_file(project_root / "a.test.ts")
        _ = memory_store.add_directory(project_root / "__tests__")
        _ = memory_store.add_directory(project_root / "ui")
        _ = memory_store.add_file(
            project_root / ".barrelify.json",
            '{"exclude": ["*.test.ts", "__tests__"]}',
        )

        scan = make_scanner(memory_store).scan(project_root)

        assert scan.files == ("a.ts",)
        assert scan.subdirectories == ("ui",)
        assert scan.config.exclude == ["*.test.ts", "__tests__"]

    def test_linked_directories_are_left_out(self, memory_store: InMemoryStore, project_root: Path) -> None:
        """Test that linked directories are neither descended into nor re-exported."""
        _ = memory_store.add_file(project_root / "shared" / "a.ts")
        _ = memory_store.add_symlink(project_root / "loop", project_root)
        _ = memory_store.add_symlink(project_root / "alias.ts", project_root / "shared" / "a.ts")

        scan = make_scanner(memory_store).scan(project_root)

        assert scan.files == ("alias.ts",)
        assert scan.subdirectories == ("shared",)
        assert scan.barrel_candidates == ("shared",)

    def test_no_subdirs_clears_barrel_candidates(self, memory_store: InMemoryStore, project_root: Path) -> None:
        """Test that disabling subdirectory barrels keeps recursion targets."""
        _ = memory_store.add_directory(project_root / "ui")

        scan = make_scanner(memory_store, include_subdirectories=False).scan(project_root)

        assert scan.subdirectories == ("ui",)
        assert scan.barrel_candidates == ()
        assert scan.is_empty

    def test_empty_directory(self, memory_store: InMemoryStore, project_root: Path) -> None:
        """Test scanning a directory with nothing to export."""
        _ = memory_store.add_file(project_root / "notes.txt")

        scan = make_scanner(memory_store).scan(project_root)

        assert scan.is_empty

    def test_malformed_sidecar_degrades(
        self,
        memory_store: InMemoryStore,
        project_root: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that an invalid sidecar means no exclusions."""
        _ = memory_store.add_file(project_root / "a.test.ts")
        _ = memory_store.add_file(project_root / ".barrelify.json", "{not json")

        scan = make_scanner(memory_store).scan(project_root)

        assert scan.files == ("a.test.ts",)
        assert "Could not parse .barrelify.json" in caplog.text

    def test_scan_summary_is_logged(
        self,
        memory_store: InMemoryStore,
        project_root: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test the debug summary of a scan."""
        _ = memory_store.add_file(project_root / "a.ts")
        _ = memory_store.add_file(project_root / ".barrelify.json", '{"exclude": ["*.spec.ts", "fixtures"]}')
        caplog.set_level(logging.DEBUG, logger="barrelify.core.filesystem.scanner")

        _ = make_scanner(memory_store).scan(project_root)

        assert f"Scanned {project_root}: 1 source files, 0 subdirectories, 2 exclude patterns" in caplog.text
