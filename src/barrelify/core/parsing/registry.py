"""Extension-based dispatch from source files to export classifiers."""

from __future__ import annotations

import logging
from pathlib import Path

from barrelify.exceptions import SourceParseError
from barrelify.types.models import ExportSet
from barrelify.types.protocols import DirectoryStore

from .classifier import (
    ComponentClassifier,
    ExportClassifier,
    ScriptClassifier,
    TypedScriptClassifier,
)

logger = logging.getLogger(__name__)


class ClassifierRegistry:
    """Maps file extensions to the classifier for that dialect."""

    def __init__(self) -> None:
        self._by_extension: dict[str, ExportClassifier] = {}

    def register(self, classifier: ExportClassifier) -> None:
        """Register a classifier for every extension it declares.

        A later registration for the same extension replaces the earlier one.
        """
        for extension in classifier.extensions:
            self._by_extension[extension] = classifier
        logger.debug(f"Registered classifier: {classifier.get_description()}")

    @property
    def extensions(self) -> tuple[str, ...]:
        """Recognised source extensions, sorted."""
        return tuple(sorted(self._by_extension))

    def get_classifier(self, filename: str) -> ExportClassifier | None:
        """Find the classifier for a file name, longest matching extension first."""
        for extension in sorted(self._by_extension, key=len, reverse=True):
            if filename.endswith(extension):
                return self._by_extension[extension]
        return None

    def classify_file(self, store: DirectoryStore, path: Path) -> ExportSet | None:
        """Classify one source file, degrading instead of failing.

        Args:
            store: Storage collaborator used to read the file
            path: Source file path

        Returns:
            Classified exports, or None when the file must be re-exported
            with a wildcard because it could not be read or parsed
        """
        classifier = self.get_classifier(path.name)
        if classifier is None:
            logger.warning(f"No classifier for {path}, using fallback")
            return None

        try:
            source = store.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}, using fallback: {e}")
            return None

        try:
            return classifier.classify(source, path.name)
        except SourceParseError as e:
            logger.warning(f"Could not parse {path}, using fallback ({e.detail or 'syntax error'})")
            return None


def default_registry() -> ClassifierRegistry:
    """Create a registry with the script, typed script and component dialects."""
    registry = ClassifierRegistry()
    registry.register(ScriptClassifier())
    registry.register(TypedScriptClassifier())
    registry.register(ComponentClassifier())
    return registry
