"""Errors raised while reading per-directory sidecar configuration.

Sidecar problems are never fatal. The loader turns whatever went wrong into
a ConfigError, logs it once at warning level and continues with defaults.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from barrelify.exceptions import BarrelifyError

logger = logging.getLogger(__name__)


class ConfigError(BarrelifyError):
    """Base exception for sidecar configuration problems.

    ``context`` holds details appended to the logged message, such as the
    sidecar path or the failing field.
    """

    def __init__(self, message: str, context: Mapping[str, object] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, object] = dict(context or {})

    def describe(self) -> str:
        """Return the message followed by its context, if any."""
        if not self.context:
            return str(self)
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self} (context: {details})"


class ConfigLoadError(ConfigError):
    """Raised when a sidecar exists but cannot be read or decoded as JSON."""

    def __init__(self, path: Path, reason: str | None = None) -> None:
        context: dict[str, object] = {"file_path": str(path)}
        if reason:
            context["reason"] = reason
        super().__init__(f"Could not parse {path.name} in {path.parent}", context)
        self.file_path: str = str(path)


class ConfigValidationError(ConfigError):
    """Raised when a decoded sidecar does not match the ExcludeConfig schema."""

    def __init__(self, path: Path, pydantic_error: ValidationError) -> None:
        self.errors: list[tuple[str, str]] = [
            (".".join(str(loc) for loc in err["loc"]) or "<root>", err["msg"])
            for err in pydantic_error.errors()
        ]
        super().__init__(
            f"Invalid {path.name} in {path.parent}",
            {
                "file_path": str(path),
                "errors": "; ".join(f"{field}: {message}" for field, message in self.errors),
            },
        )
        self.pydantic_error: ValidationError = pydantic_error


def handle_config_error(error: Exception, path: Path) -> ConfigError:
    """Wrap any sidecar failure in a ConfigError for ``path``.

    ConfigError instances pass through unchanged; pydantic errors become
    ConfigValidationError; anything else becomes a ConfigLoadError naming
    the original exception type. The original is kept as ``__cause__``.
    """
    if isinstance(error, ConfigError):
        return error

    wrapped: ConfigError
    if isinstance(error, ValidationError):
        wrapped = ConfigValidationError(path, error)
    else:
        wrapped = ConfigLoadError(path, reason=f"{type(error).__name__}: {error}")
    wrapped.__cause__ = error
    return wrapped


def log_config_error(error: ConfigError, level: int = logging.WARNING) -> None:
    """Log a configuration error with its context.

    Args:
        error: Configuration error to log
        level: Logging level (default: WARNING)
    """
    logger.log(level, error.describe())
