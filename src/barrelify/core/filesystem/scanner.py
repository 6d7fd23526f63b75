"""Directory scanner producing the filtered snapshot of one directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from barrelify.config.loader import load_exclude_config
from barrelify.config.models import GeneratorSettings
from barrelify.types.models import DirectoryScan
from barrelify.types.protocols import DirectoryStore

from .exclusions import ExclusionFilter

logger = logging.getLogger(__name__)


class DirectoryScanner:
    """Lists one directory and partitions it into barrel inputs.

    Provides:
    - Per-directory exclusion patterns loaded from the sidecar file
    - Source file selection by extension, never including the output file
    - Subdirectory selection for recursion and for re-export lines, leaving
      out symbolically linked directories
    """

    def __init__(
        self,
        store: DirectoryStore,
        settings: GeneratorSettings,
        source_extensions: Iterable[str],
    ) -> None:
        """Initialize the directory scanner.

        Args:
            store: Storage collaborator used for listing and type checks
            settings: Run-wide generator settings
            source_extensions: File suffixes recognised as source modules
        """
        self.store: DirectoryStore = store
        self.settings: GeneratorSettings = settings
        self.source_extensions: tuple[str, ...] = tuple(source_extensions)

    def scan(self, directory: Path) -> DirectoryScan:
        """Take the snapshot of one directory.

        The directory is listed once; excludes from its own sidecar apply to
        files and subdirectories alike.

        Args:
            directory: Directory to scan (must exist)

        Returns:
            Filtered snapshot of the directory
        """
        config = load_exclude_config(self.store, directory, self.settings.config_filename)
        exclusion_filter = ExclusionFilter(config.exclude)

        files: list[str] = []
        subdirectories: list[str] = []
        for name in self.store.list_dir(directory):
            entry = directory / name
            if self._is_source_file(name, entry):
                files.append(name)
            elif self.store.is_dir(entry):
                if self.store.is_symlink(entry):
                    # A linked directory may point back up the tree
                    logger.debug(f"Skipping linked directory {entry}")
                    continue
                subdirectories.append(name)

        files = exclusion_filter.filter_names(files)
        subdirectories = exclusion_filter.filter_names(subdirectories)
        barrel_candidates = subdirectories if self.settings.include_subdirectories else []

        logger.debug(
            f"Scanned {directory}: {len(files)} source files, "
            f"{len(subdirectories)} subdirectories, "
            f"{exclusion_filter.get_pattern_count()} exclude patterns"
        )
        return DirectoryScan(
            path=directory,
            config=config,
            files=tuple(files),
            subdirectories=tuple(subdirectories),
            barrel_candidates=tuple(barrel_candidates),
        )

    def _is_source_file(self, name: str, entry: Path) -> bool:
        """Check if a directory entry is a candidate source module.

        Args:
            name: Entry name
            entry: Full entry path

        Returns:
            True for regular files with a recognised suffix other than the output file
        """
        if name == self.settings.output_file:
            return False
        if not name.endswith(self.source_extensions):
            return False
        return self.store.is_file(entry)
