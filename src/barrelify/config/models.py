"""Configuration models for barrel generation."""

from __future__ import annotations

from typing import Annotated, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from barrelify.types.models import ExportMode

DEFAULT_OUTPUT_FILE: Final[str] = "index.ts"
DEFAULT_CONFIG_FILENAME: Final[str] = ".barrelify.json"
TYPED_OUTPUT_SUFFIXES: Final[tuple[str, ...]] = (".ts", ".tsx")


class BaseConfig(BaseModel):
    """Base configuration model with common settings."""

    model_config: ConfigDict = ConfigDict(  # pyright: ignore[reportIncompatibleVariableOverride]
        validate_assignment=True,
        # Names and patterns are matched verbatim, surrounding spaces included
        str_strip_whitespace=False,
        validate_default=True,
    )


class ExcludeConfig(BaseConfig):
    """Per-directory configuration read from the sidecar file.

    Unknown keys are ignored so sidecars can carry notes for other tools.
    """

    model_config: ConfigDict = ConfigDict(  # pyright: ignore[reportIncompatibleVariableOverride]
        extra="ignore",
        frozen=True,
    )

    exclude: Annotated[
        list[str],
        Field(description="Glob patterns for file and subdirectory names to skip"),
    ] = []

    @field_validator("exclude", mode="before")
    @classmethod
    def coerce_null_exclude(cls, v: object) -> object:
        """Treat an explicit JSON null as no exclusions."""
        return [] if v is None else v


class GeneratorSettings(BaseConfig):
    """Run-wide options taken from the command line."""

    output_file: Annotated[
        str,
        Field(description="Barrel file name written into each directory"),
    ] = DEFAULT_OUTPUT_FILE
    mode: Annotated[
        ExportMode,
        Field(description="Named re-exports or wildcard re-exports"),
    ] = ExportMode.NAMED
    include_subdirectories: Annotated[
        bool,
        Field(description="Re-export subdirectories that already have a barrel"),
    ] = True
    recursive: Annotated[
        bool,
        Field(description="Process every subdirectory first, leaf-first"),
    ] = False
    dry_run: Annotated[
        bool,
        Field(description="Render barrels without writing them"),
    ] = False
    config_filename: Annotated[
        str,
        Field(description="Name of the per-directory sidecar configuration file"),
    ] = DEFAULT_CONFIG_FILENAME

    @field_validator("output_file", "config_filename", mode="after")
    @classmethod
    def validate_plain_file_name(cls, v: str) -> str:
        """Validate that a file name has no directory component.

        Raises:
            ValueError: If the name is blank, a dot entry, or contains a separator
        """
        if not v.strip() or v in {".", ".."}:
            msg = f"Invalid file name: {v!r}"
            raise ValueError(msg)
        if "/" in v or "\\" in v:
            msg = f"File name must not contain path separators: {v!r}"
            raise ValueError(msg)
        return v

    @property
    def typed_output(self) -> bool:
        """True when the output file targets the typed dialect."""
        return self.output_file.endswith(TYPED_OUTPUT_SUFFIXES)
