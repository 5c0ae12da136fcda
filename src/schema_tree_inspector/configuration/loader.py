"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from schema_tree_inspector.schema_management.schema_translation import (
    SchemaError,
    load_schema_document,
    translate_schema,
)

from .runtime_settings import Configuration, RenderingSettings, SchemaConfig

_LOGGER = logging.getLogger("schema_tree_inspector.configuration")

SCHEMA_TYPES = ("avsc", "json_schema")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema_section = parsed.get("schema")
    schema = (
        None
        if schema_section is None
        else _parse_schema_section(schema_section, path.parent, "schema")
    )
    auxiliary_schemas = _parse_auxiliary_schemas(parsed.get("auxiliary_schemas"), path.parent)
    for schema_config in (schema, *auxiliary_schemas):
        if schema_config is not None:
            _validate_schema(schema_config)
    rendering = _parse_rendering_section(parsed.get("rendering"))

    _LOGGER.debug(
        "Loaded configuration %s (root schema: %s, auxiliary schemas: %d)",
        path,
        schema.schema_type if schema else "none",
        len(auxiliary_schemas),
    )
    return Configuration(
        path=path,
        schema=schema,
        auxiliary_schemas=auxiliary_schemas,
        rendering=rendering,
    )


def _parse_schema_section(value: Any, base_path: Path, section_name: str) -> SchemaConfig:
    section = _require_mapping(value, section_name)
    type_candidates = [key for key in SCHEMA_TYPES if section.get(key)]
    if len(type_candidates) != 1:
        raise ConfigurationError(
            f"{section_name} must provide exactly one schema type (avsc or json_schema)."
        )

    schema_type = type_candidates[0]
    definition = section[schema_type]
    text, source_path = _load_schema_definition(definition, base_path)
    if not text.strip():
        raise ConfigurationError("Schema text cannot be empty.")

    return SchemaConfig(schema_type=schema_type, text=text, source_path=source_path)


def _parse_auxiliary_schemas(value: Any, base_path: Path) -> tuple[SchemaConfig, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("auxiliary_schemas must be a list of schema definitions.")
    return tuple(
        _parse_schema_section(item, base_path, f"auxiliary_schemas[{index}]")
        for index, item in enumerate(value)
    )


def _load_schema_definition(definition: Any, base_path: Path) -> tuple[str, Path | None]:
    if isinstance(definition, str):
        return definition, None
    mapping = _require_mapping(definition, "schema definition")
    inline = mapping.get("inline")
    path_value = mapping.get("path")
    if inline and path_value:
        raise ConfigurationError("Schema definition must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("Schema inline value must be a string.")
        return inline, None
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("Schema path must be a string.")
        schema_path = _resolve_path(base_path, path_value)
        if not schema_path.exists():
            raise ConfigurationError(f"Schema file not found: {schema_path}")
        try:
            text = schema_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(f"Failed to read schema file {schema_path}: {exc}") from exc
        return text, schema_path
    raise ConfigurationError("Schema definition requires either inline or path.")


def _validate_schema(schema_config: SchemaConfig) -> None:
    try:
        translate_schema(load_schema_document(schema_config))
    except SchemaError as exc:
        raise ConfigurationError(str(exc)) from exc


def _parse_rendering_section(value: Any) -> RenderingSettings:
    if value is None:
        return RenderingSettings()
    section = _require_mapping(value, "rendering")
    defaults = RenderingSettings()
    return RenderingSettings(
        max_depth=_require_positive_int(
            section.get("max_depth", defaults.max_depth), "rendering.max_depth"
        ),
        array_max_properties=_require_positive_int(
            section.get("array_max_properties", defaults.array_max_properties),
            "rendering.array_max_properties",
        ),
        object_max_properties=_require_positive_int(
            section.get("object_max_properties", defaults.object_max_properties),
            "rendering.object_max_properties",
        ),
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
