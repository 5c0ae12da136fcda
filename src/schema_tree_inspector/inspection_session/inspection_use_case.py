"""Inspection use-case service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from schema_tree_inspector.annotation_extraction.node_unwrapping import unwrap_for_display
from schema_tree_inspector.configuration import (
    Configuration,
    ConfigurationError,
    RenderingSettings,
    SchemaConfig,
    load_configuration,
)
from schema_tree_inspector.inspection_rendering.tree_walker import (
    DataPathError,
    render_tree,
    select_data_at_path,
)
from schema_tree_inspector.schema_context.context_facade import SchemaContext, create_context
from schema_tree_inspector.schema_management import (
    SchemaError,
    load_schema_document,
    translate_schema,
)
from schema_tree_inspector.schema_nodes.node_models import SchemaNode

from .session_contracts import InspectionOutcome, InspectionRequest, PathDescription

_LOGGER = logging.getLogger("schema_tree_inspector.inspection")


class InspectionError(Exception):
    """Raised when an inspection use case cannot be completed."""


def build_root_context(configuration: Configuration) -> SchemaContext:
    """Translate the configured schemas and create the session's root context."""
    try:
        root_schema = _translate(configuration.schema) if configuration.schema else None
        auxiliary = tuple(_translate(schema) for schema in configuration.auxiliary_schemas)
    except SchemaError as exc:
        raise InspectionError(str(exc)) from exc
    context = create_context(root_schema, auxiliary)
    _LOGGER.debug("Created schema context with %d registered schemas", len(context.registry))
    return context


def execute_inspection(request: InspectionRequest) -> InspectionOutcome:
    """Render the data file of `request` as an annotated inspection tree."""
    configuration = _load_optional_configuration(request.config_path)
    root_context = (
        build_root_context(configuration) if configuration else create_context()
    )
    settings = configuration.rendering if configuration else RenderingSettings()

    data = load_data_document(request.data_path)
    try:
        selected = select_data_at_path(data, request.tree_path)
    except DataPathError as exc:
        raise InspectionError(str(exc)) from exc

    lines = render_tree(selected, root_context, settings, path=request.tree_path)
    _LOGGER.debug("Rendered %d tree lines from %s", len(lines), request.data_path)
    return InspectionOutcome(lines=tuple(lines), has_schema=root_context.has_schema)


def describe_schema_path(config_path: str, path: str) -> PathDescription:
    """Resolve the schema at `path` and report its display metadata."""
    root_context = build_root_context(_load_configuration(config_path))
    context = root_context.get_context_for_path(path)
    unwrapped = unwrap_for_display(context.schema)
    return PathDescription(
        path=path,
        schema_kind=unwrapped.kind.value if unwrapped is not None else None,
        display_name=context.get_display_name(),
        description=context.get_description(),
    )


def list_registered_schemas(config_path: str) -> tuple[str, ...]:
    return build_root_context(_load_configuration(config_path)).registry.names()


def load_data_document(data_path: Path | str) -> Any:
    """Load inspected data from a JSON or YAML file."""
    path = Path(data_path)
    if not path.exists():
        raise InspectionError(f"Data file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InspectionError(f"Failed to read data file {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InspectionError(f"Failed to parse data file: {exc}") from exc


def _translate(schema_config: SchemaConfig) -> SchemaNode:
    return translate_schema(load_schema_document(schema_config))


def _load_configuration(config_path: str) -> Configuration:
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise InspectionError(str(exc)) from exc


def _load_optional_configuration(config_path: str | None) -> Configuration | None:
    if config_path is None:
        return None
    return _load_configuration(config_path)
