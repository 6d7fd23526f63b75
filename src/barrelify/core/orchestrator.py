"""Barrel generator coordinating scanning, classification and rendering.

The generator processes one directory at a time:

- validate the target directory (fatal when missing or not a directory)
- scan it: load the sidecar excludes, list entries once, partition them
- classify every candidate source file
- render the barrel, subdirectory re-exports first
- overwrite the output file through the directory store

In recursive mode directories are visited post-order, so a child's barrel
is written before its parent checks whether that barrel exists. The output
file of a child is the only signal passed from child to parent. Only
problems with the root directory stop a recursive run; a failing
subdirectory is skipped with a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from barrelify.config.models import GeneratorSettings
from barrelify.core.filesystem.scanner import DirectoryScanner
from barrelify.core.filesystem.walker import walk_post_order
from barrelify.core.parsing.registry import ClassifierRegistry, default_registry
from barrelify.core.rendering.renderer import build_plan
from barrelify.exceptions import TargetDirectoryError, TargetNotDirectoryError, TargetNotFoundError
from barrelify.types.models import BarrelPlan, DirectoryResult, DirectoryScan, ExportSet
from barrelify.types.protocols import DirectoryStore
from barrelify.utils.logging import directory_context

__all__ = ["BarrelGenerator"]

logger = logging.getLogger(__name__)


class BarrelGenerator:
    """Generate barrel files for one directory or a whole tree."""

    def __init__(
        self,
        *,
        store: DirectoryStore,
        settings: GeneratorSettings | None = None,
        registry: ClassifierRegistry | None = None,
    ) -> None:
        self.store: DirectoryStore = store
        self.settings: GeneratorSettings = settings or GeneratorSettings()
        self.registry: ClassifierRegistry = registry or default_registry()
        self.scanner: DirectoryScanner = DirectoryScanner(
            store,
            self.settings,
            self.registry.extensions,
        )
        # Barrels rendered but not written during a dry run still count as
        # present for parent directories.
        self._dry_run_outputs: set[Path] = set()
        # Subdirectories abandoned after a listing or write failure
        self._skipped: set[Path] = set()

    def run(self, directory: Path) -> list[DirectoryResult]:
        """Process ``directory`` alone, or its whole tree in recursive mode.

        Raises:
            TargetDirectoryError: If the directory is missing or not a directory
        """
        if self.settings.recursive:
            return self.process_tree(directory)
        return [self.process(directory)]

    def validate(self, directory: Path) -> None:
        """Check that ``directory`` exists and is a directory.

        Raises:
            TargetNotFoundError: If nothing exists at the path
            TargetNotDirectoryError: If the path is not a directory
        """
        if not self.store.exists(directory):
            raise TargetNotFoundError(directory)
        if not self.store.is_dir(directory):
            raise TargetNotDirectoryError(directory)

    def process(self, directory: Path) -> DirectoryResult:
        """Generate the barrel of a single directory.

        Args:
            directory: Directory to process

        Returns:
            Outcome of the visit

        Raises:
            TargetDirectoryError: If the directory is missing or not a directory
        """
        self.validate(directory)
        with directory_context(directory):
            return self._generate(self.scanner.scan(directory))

    def process_tree(self, root: Path) -> list[DirectoryResult]:
        """Generate barrels for ``root`` and every non-excluded subdirectory, leaf-first.

        Each directory's own sidecar decides which of its subdirectories are
        descended into. Subdirectories excluded there are neither processed
        nor re-exported. A subdirectory that cannot be listed or written is
        logged and dropped with everything below it, and its parent renders
        as if it had no barrel.

        Args:
            root: Root of the tree

        Returns:
            Outcomes in visiting order; the root's outcome is last

        Raises:
            TargetDirectoryError: If the root is missing or not a directory
            OSError: If the root itself cannot be listed or written
        """

        def expand(directory: Path) -> tuple[DirectoryScan | None, Sequence[Path]]:
            if directory == root:
                return self._expand(directory)
            try:
                return self._expand(directory)
            except (OSError, TargetDirectoryError) as e:
                self._skip(directory, f'Skipping "{directory}" and its subdirectories: {e}')
                return None, ()

        results: list[DirectoryResult] = []
        for directory, scan in walk_post_order(root, expand):
            if scan is None:
                continue
            with directory_context(directory):
                try:
                    results.append(self._generate(scan))
                except OSError as e:
                    if directory == root:
                        raise
                    self._skip(directory, f'Could not write barrel for "{directory}": {e}')
        return results

    def plan(self, scan: DirectoryScan) -> BarrelPlan:
        """Classify the scanned files and render the directory's barrel.

        Subdirectory barrels are checked for existence here, so in a tree
        walk this must only run after the subdirectories were processed.
        """
        subdirectories = [name for name in scan.barrel_candidates if self._has_barrel(scan.path / name)]
        modules: list[tuple[str, ExportSet | None]] = [
            (filename, self.registry.classify_file(self.store, scan.path / filename))
            for filename in scan.files
        ]
        return build_plan(
            subdirectories,
            modules,
            mode=self.settings.mode,
            typed_output=self.settings.typed_output,
        )

    def _expand(self, directory: Path) -> tuple[DirectoryScan, Sequence[Path]]:
        self.validate(directory)
        with directory_context(directory):
            scan = self.scanner.scan(directory)
        return scan, [directory / name for name in scan.subdirectories]

    def _skip(self, directory: Path, message: str) -> None:
        self._skipped.add(directory)
        logger.warning(message)

    def _has_barrel(self, subdirectory: Path) -> bool:
        if subdirectory in self._skipped:
            return False
        barrel_path = subdirectory / self.settings.output_file
        return barrel_path in self._dry_run_outputs or self.store.is_file(barrel_path)

    def _generate(self, scan: DirectoryScan) -> DirectoryResult:
        output_path = scan.path / self.settings.output_file

        if scan.is_empty:
            logger.warning(f'No source files or subdirectories found in "{scan.path}"')
            return DirectoryResult(path=scan.path, output_path=output_path, written=False)

        plan = self.plan(scan)
        content = plan.render()

        if self.settings.dry_run:
            self._dry_run_outputs.add(output_path)
            logger.info(f"Dry run: would write {output_path} with {plan.export_count} exports")
        else:
            self.store.write_text(output_path, content)
            logger.info(f"Wrote {output_path} with {plan.export_count} exports")

        return DirectoryResult(
            path=scan.path,
            output_path=output_path,
            written=not self.settings.dry_run,
            export_count=plan.export_count,
            content=content,
        )
