"""JSON loader for per-directory sidecar configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from barrelify.config.exceptions import (
    ConfigError,
    ConfigLoadError,
    handle_config_error,
    log_config_error,
)
from barrelify.config.models import DEFAULT_CONFIG_FILENAME, ExcludeConfig
from barrelify.types.protocols import DirectoryStore

logger = logging.getLogger(__name__)


class JsonConfigLoader:
    """Loader for JSON configuration files read through a directory store."""

    def __init__(self, store: DirectoryStore) -> None:
        """Initialize JsonConfigLoader.

        Args:
            store: Storage collaborator used to read the file
        """
        self.store: DirectoryStore = store

    def load(self, path: Path) -> dict[str, object]:
        """Load a JSON document.

        Args:
            path: Path to the JSON file

        Returns:
            Parsed document; a non-object document yields an empty dictionary

        Raises:
            ConfigLoadError: If the file cannot be read or parsed
        """
        try:
            content = json.loads(self.store.read_text(path))  # pyright: ignore[reportAny] # json.loads returns Any
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigLoadError(path, reason=str(e)) from e

        if isinstance(content, dict):
            return content  # pyright: ignore[reportUnknownVariableType] # content is dict after isinstance check
        logger.debug(f"Ignoring non-object configuration document in {path}")
        return {}


def load_exclude_config(
    store: DirectoryStore,
    directory: Path,
    filename: str = DEFAULT_CONFIG_FILENAME,
) -> ExcludeConfig:
    """Load the sidecar configuration of one directory.

    A missing sidecar yields the default configuration silently. An
    unreadable, malformed or invalid sidecar yields the default configuration
    and a warning; it never stops processing.

    Args:
        store: Storage collaborator
        directory: Directory whose sidecar should be loaded
        filename: Sidecar file name

    Returns:
        Validated configuration for the directory
    """
    config_path = directory / filename
    if not store.is_file(config_path):
        return ExcludeConfig()

    try:
        raw = JsonConfigLoader(store).load(config_path)
        config = ExcludeConfig.model_validate(raw)
    except (ConfigError, ValidationError) as e:
        log_config_error(handle_config_error(e, config_path))
        return ExcludeConfig()

    logger.debug(f"Loaded {len(config.exclude)} exclude patterns from {config_path}")
    return config
