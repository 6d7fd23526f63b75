"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from barrelify.config.models import GeneratorSettings
from barrelify.core.orchestrator import BarrelGenerator
from barrelify.storage.memory import InMemoryStore
from barrelify.utils.logging import DirectoryContextFilter

PROJECT_ROOT = Path("/project")


@pytest.fixture
def memory_store() -> InMemoryStore:
    """Provide an in-memory store holding an empty project root."""
    store = InMemoryStore()
    _ = store.add_directory(PROJECT_ROOT)
    return store


@pytest.fixture
def project_root() -> Path:
    """Root directory of the in-memory project."""
    return PROJECT_ROOT


@pytest.fixture
def component_tree(memory_store: InMemoryStore) -> InMemoryStore:
    """Provide a small component library.

    Layout::

        /project
        ├── Button.tsx
        ├── utils.ts
        ├── Button.test.tsx
        ├── .barrelify.json   (excludes *.test.tsx and __tests__)
        ├── __tests__/
        │   └── setup.ts
        └── forms/
            ├── Input.tsx
            └── types.ts
    """
    _ = memory_store.add_file(
        PROJECT_ROOT / "Button.tsx",
        "export interface ButtonProps { label: string }\n"
        + "export const Button = (props: ButtonProps) => <button>{props.label}</button>;\n"
        + "export default Button;\n",
    )
    _ = memory_store.add_file(
        PROJECT_ROOT / "utils.ts",
        "export function clamp(value: number, min: number, max: number): number {\n"
        + "  return Math.min(Math.max(value, min), max);\n"
        + "}\n"
        + "export const EPSILON = 0.0001;\n",
    )
    _ = memory_store.add_file(PROJECT_ROOT / "Button.test.tsx", "export const fixture = 1;\n")
    _ = memory_store.add_file(
        PROJECT_ROOT / ".barrelify.json",
        '{"exclude": ["*.test.tsx", "__tests__"]}',
    )
    _ = memory_store.add_file(PROJECT_ROOT / "__tests__" / "setup.ts", "export const setup = true;\n")
    _ = memory_store.add_file(
        PROJECT_ROOT / "forms" / "Input.tsx",
        "export const Input = () => <input />;\n",
    )
    _ = memory_store.add_file(
        PROJECT_ROOT / "forms" / "types.ts",
        "export type InputSize = 'sm' | 'md' | 'lg';\n",
    )
    return memory_store


@pytest.fixture
def make_generator(memory_store: InMemoryStore) -> Callable[..., BarrelGenerator]:
    """Factory building a generator over the in-memory store."""

    def _make(**settings: object) -> BarrelGenerator:
        return BarrelGenerator(
            store=memory_store,
            settings=GeneratorSettings.model_validate(settings),
        )

    return _make


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Remove console handlers installed by configure_logging and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    try:
        yield
    finally:
        for handler in list(root_logger.handlers):
            if any(isinstance(f, DirectoryContextFilter) for f in handler.filters):
                root_logger.removeHandler(handler)
        root_logger.setLevel(level)
