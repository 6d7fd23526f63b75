"""barrelify - generate barrel files for JavaScript and TypeScript directories.

This package scans a source directory, classifies the exports of every
module and writes an aggregator file re-exporting them, optionally for a
whole tree, leaf-first.
"""

__version__ = "0.1.0"

from barrelify.core.orchestrator import BarrelGenerator  # noqa: E402

__all__ = ["BarrelGenerator", "__version__"]
