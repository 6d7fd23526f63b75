"""Export classification of source modules."""

from __future__ import annotations

from .classifier import (
    ComponentClassifier,
    ExportClassifier,
    ScriptClassifier,
    TreeSitterClassifier,
    TypedScriptClassifier,
)
from .registry import ClassifierRegistry, default_registry

__all__ = [
    "ClassifierRegistry",
    "ComponentClassifier",
    "ExportClassifier",
    "ScriptClassifier",
    "TreeSitterClassifier",
    "TypedScriptClassifier",
    "default_registry",
]
