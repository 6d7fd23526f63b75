#!/usr/bin/env python3
"""Storage isolation validation script.

core/ and types/ must reach the filesystem only through the DirectoryStore
protocol, so the generator runs unchanged against an in-memory tree. This
script parses every module in those packages and reports:

- imports of os, shutil or glob
- imports from barrelify.storage (concrete stores belong to the caller)
- calls to open() and to Path.iterdir()/stat()/glob()/rglob()

Exit codes:
    0: No violations found (clean)
    1: Violations detected (architectural rule broken)
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path
from typing import Final

# ANSI color codes for terminal output
RED: Final[str] = "\033[91m"
GREEN: Final[str] = "\033[92m"
YELLOW: Final[str] = "\033[93m"
RESET: Final[str] = "\033[0m"

# Packages that must stay storage-agnostic
PROTECTED_DIRS: Final[tuple[str, ...]] = ("core", "types")

FORBIDDEN_MODULES: Final[frozenset[str]] = frozenset({"os", "shutil", "glob"})
STORE_PACKAGE: Final[str] = "barrelify.storage"
FORBIDDEN_METHODS: Final[frozenset[str]] = frozenset({"iterdir", "stat", "glob", "rglob"})


class IsolationVisitor(ast.NodeVisitor):
    """Collects (line, description) pairs for direct filesystem access."""

    def __init__(self) -> None:
        self.violations: list[tuple[int, str]] = []

    def visit_Import(self, node: ast.Import) -> None:  # noqa: N802
        for alias in node.names:
            if alias.name.split(".")[0] in FORBIDDEN_MODULES:
                self.violations.append((node.lineno, f"Filesystem module import: {alias.name}"))
        self.generic_visit(node)

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:  # noqa: N802
        module = node.module or ""
        if module.split(".")[0] in FORBIDDEN_MODULES:
            self.violations.append((node.lineno, f"Filesystem module import: {module}"))
        elif module == STORE_PACKAGE or module.startswith(f"{STORE_PACKAGE}."):
            self.violations.append((node.lineno, f"Concrete store import: {module}"))
        self.generic_visit(node)

    def visit_Call(self, node: ast.Call) -> None:  # noqa: N802
        func = node.func
        if isinstance(func, ast.Name) and func.id == "open":
            self.violations.append((node.lineno, "Direct filesystem access: open()"))
        elif isinstance(func, ast.Attribute) and func.attr in FORBIDDEN_METHODS:
            self.violations.append((node.lineno, f"Direct filesystem access: .{func.attr}()"))
        self.generic_visit(node)


def check_file(file_path: Path) -> list[tuple[int, str]]:
    """Check a single Python file for storage isolation violations.

    Args:
        file_path: Path to the Python file to check.

    Returns:
        List of (line_number, violation_description) tuples, sorted by line.
        Empty list if no violations found.
    """
    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"), filename=str(file_path))
    except (OSError, SyntaxError) as e:
        print(f"{YELLOW}Warning: Could not parse {file_path}: {e}{RESET}", file=sys.stderr)
        return []

    visitor = IsolationVisitor()
    visitor.visit(tree)
    return sorted(visitor.violations)


def scan_directory(base_path: Path, protected_dir: str) -> dict[Path, list[tuple[int, str]]]:
    """Check every module below one protected package.

    Args:
        base_path: Root path of the barrelify package.
        protected_dir: Name of protected directory.

    Returns:
        Dictionary mapping file paths to their violations.
    """
    dir_path = base_path / protected_dir
    if not dir_path.is_dir():
        print(f"{YELLOW}Warning: Protected directory {dir_path} does not exist{RESET}", file=sys.stderr)
        return {}

    results = {py_file: check_file(py_file) for py_file in sorted(dir_path.rglob("*.py"))}
    return {py_file: violations for py_file, violations in results.items() if violations}


def main() -> int:
    """Main entry point for storage isolation check.

    Returns:
        Exit code: 0 if no violations, 1 if violations found.
    """
    project_root = Path(__file__).parent.parent
    src_path = project_root / "src" / "barrelify"

    if not src_path.is_dir():
        print(f"{RED}Error: Could not find src/barrelify directory{RESET}", file=sys.stderr)
        return 1

    print(f"Checking storage isolation in {', '.join(PROTECTED_DIRS)} under {src_path}\n")

    all_violations: dict[Path, list[tuple[int, str]]] = {}
    for protected_dir in PROTECTED_DIRS:
        all_violations.update(scan_directory(src_path, protected_dir))

    if not all_violations:
        print(f"{GREEN}✓ No storage isolation violations found!{RESET}")
        return 0

    total = sum(len(v) for v in all_violations.values())
    print(f"{RED}✗ Found {total} storage isolation violations:{RESET}\n")
    for file_path, violations in all_violations.items():
        print(f"{RED}{file_path.relative_to(project_root)}{RESET}")
        for line_num, description in violations:
            print(f"  {line_num}: {description}")
        print()

    print("Use the DirectoryStore passed to the generator instead of touching the disk.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
