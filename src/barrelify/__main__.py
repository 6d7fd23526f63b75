"""Application entry point and CLI for barrelify.

This module implements the command-line interface: argument parsing,
logging setup, generator construction and exit-code mapping.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from pydantic import ValidationError

from barrelify import __version__
from barrelify.config.models import DEFAULT_CONFIG_FILENAME, DEFAULT_OUTPUT_FILE, GeneratorSettings
from barrelify.core.orchestrator import BarrelGenerator
from barrelify.exceptions import TargetDirectoryError
from barrelify.storage.local import FileSystemStore
from barrelify.types.models import DirectoryResult, ExportMode
from barrelify.utils.logging import configure_logging

__all__ = ["main", "parse_arguments"]

# Exit codes
EXIT_SUCCESS = 0
EXIT_TARGET_ERROR = 1
EXIT_USAGE_ERROR = 1
EXIT_RUNTIME_ERROR = 1


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for barrelify.

    Args:
        argv: Argument list (default: ``sys.argv[1:]``)

    Returns:
        Parsed arguments namespace

    CLI Arguments:
        directory: Target directory (default: current directory)
        output_file: Barrel file name (default: index.ts)
        --recursive, -r: Generate barrels leaf-first in every subdirectory
        --wildcard: Use ``export *`` instead of named re-exports
        --no-subdirs: Do not re-export subdirectory barrels
        --dry-run: Print barrels instead of writing them
        --log-level: Diagnostic verbosity
    """
    parser = argparse.ArgumentParser(
        prog="barrelify",
        description="Generate JavaScript/TypeScript barrel files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Configuration:
  Place a {DEFAULT_CONFIG_FILENAME} file in any directory to configure that directory.

  Example {DEFAULT_CONFIG_FILENAME}:
  {{
    "exclude": ["*.test.ts", "*.spec.ts", "__tests__"]
  }}

Examples:
  barrelify                    # Create index.ts with named exports, including subdirs
  barrelify -r src             # Recursively create barrel files in src and all subdirs
  barrelify src/components     # Create index.ts with named exports in src/components
  barrelify --wildcard src     # Create index.ts with wildcard exports in src
  barrelify --no-subdirs src   # Create index.ts without subdirectory barrel files
  barrelify src index.js       # Create index.js with named exports in src
        """,
    )

    _ = parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Target directory (default: current directory)",
    )

    _ = parser.add_argument(
        "output_file",
        nargs="?",
        default=DEFAULT_OUTPUT_FILE,
        help=f"Output filename (default: {DEFAULT_OUTPUT_FILE})",
        metavar="output-file",
    )

    _ = parser.add_argument(
        "--recursive",
        "-r",
        action="store_true",
        help="Generate barrel files recursively in all subdirectories (leaf-first)",
    )

    _ = parser.add_argument(
        "--wildcard",
        action="store_true",
        help="Use wildcard exports (export *) instead of named exports (default: named)",
    )

    _ = parser.add_argument(
        "--no-subdirs",
        action="store_true",
        help="Don't include barrel files from subdirectories (default: include)",
    )

    _ = parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the barrel files that would be written without writing them",
    )

    _ = parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Diagnostic verbosity on stderr (default: WARNING)",
        metavar="LEVEL",
    )

    _ = parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def report_result(result: DirectoryResult, settings: GeneratorSettings) -> None:
    """Print the outcome of one directory visit to stdout."""
    if result.content is None:
        return
    if settings.dry_run:
        print(f"// {result.output_path}")
        print(result.content, end="")
        return
    print(f"✓ Created {settings.output_file} with {result.export_count} exports in {result.path}")


def main(argv: Sequence[str] | None = None) -> NoReturn:
    """Main entry point for barrelify.

    Exit Codes:
        0: Success, or help/version displayed
        1: Target directory missing or not a directory, invalid output
           file name, or unexpected error
    """
    args = parse_arguments(argv)

    log_level_arg: str = args.log_level  # pyright: ignore[reportAny]  # argparse boundary
    configure_logging(log_level=log_level_arg)

    directory_arg: Path = args.directory  # pyright: ignore[reportAny]  # argparse boundary
    output_file_arg: str = args.output_file  # pyright: ignore[reportAny]  # argparse boundary
    wildcard_arg: bool = args.wildcard  # pyright: ignore[reportAny]  # argparse boundary
    no_subdirs_arg: bool = args.no_subdirs  # pyright: ignore[reportAny]  # argparse boundary
    recursive_arg: bool = args.recursive  # pyright: ignore[reportAny]  # argparse boundary
    dry_run_arg: bool = args.dry_run  # pyright: ignore[reportAny]  # argparse boundary

    try:
        settings = GeneratorSettings(
            output_file=output_file_arg,
            mode=ExportMode.WILDCARD if wildcard_arg else ExportMode.NAMED,
            include_subdirectories=not no_subdirs_arg,
            recursive=recursive_arg,
            dry_run=dry_run_arg,
        )
    except ValidationError as exc:
        messages = "; ".join(str(err["msg"]) for err in exc.errors())
        print(f"Error: {messages}", file=sys.stderr)
        sys.exit(EXIT_USAGE_ERROR)

    generator = BarrelGenerator(store=FileSystemStore(), settings=settings)

    try:
        results = generator.run(directory_arg)

    except TargetDirectoryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(EXIT_TARGET_ERROR)

    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(EXIT_RUNTIME_ERROR)

    except Exception as exc:
        # Unexpected error with stack trace
        print(f"Unexpected error: {exc}", file=sys.stderr)
        logging.exception("Unexpected error during barrel generation")
        sys.exit(EXIT_RUNTIME_ERROR)

    for result in results:
        report_result(result, settings)

    sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
