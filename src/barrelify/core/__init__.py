"""Core barrel generation: scanning, classification, rendering and orchestration."""

from __future__ import annotations

from .orchestrator import BarrelGenerator

__all__ = ["BarrelGenerator"]
