"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaConfig:
    """Normalized schema settings."""

    schema_type: str
    text: str
    source_path: Path | None


@dataclass(frozen=True)
class RenderingSettings:
    """Limits applied while rendering the inspection tree."""

    max_depth: int = 8
    array_max_properties: int = 10
    object_max_properties: int = 5


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaConfig | None
    auxiliary_schemas: tuple[SchemaConfig, ...]
    rendering: RenderingSettings
