"""Path-scoped schema context consumed by renderers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from schema_tree_inspector.annotation_extraction.annotation_bundle import (
    EMPTY_ANNOTATIONS,
    AnnotationBundle,
)
from schema_tree_inspector.annotation_extraction.annotation_reader import (
    format_with_pretty,
    get_annotations,
    get_display_name,
)
from schema_tree_inspector.field_resolution.member_lookup import (
    get_array_element_schema,
    get_field_schema,
)
from schema_tree_inspector.path_resolution.schema_walker import PathResolver
from schema_tree_inspector.schema_nodes.node_models import SchemaNode
from schema_tree_inspector.schema_registry.registry import SchemaRegistry


@dataclass(frozen=True)
class SchemaContext:
    """Schema view bound to one node of the inspected tree.

    `schema` describes the current node (None when unknown), `root_schema`
    stays fixed for the whole tree so path lookups always start at the root.
    """

    schema: SchemaNode | None
    root_schema: SchemaNode | None
    registry: SchemaRegistry
    resolver: PathResolver = field(repr=False, compare=False)

    @property
    def has_schema(self) -> bool:
        return self.schema is not None

    def get_annotations(self) -> AnnotationBundle:
        if self.schema is None:
            return EMPTY_ANNOTATIONS
        return get_annotations(self.schema)

    def get_display_name(self) -> str | None:
        if self.schema is None:
            return None
        return get_display_name(get_annotations(self.schema))

    def get_description(self) -> str | None:
        if self.schema is None:
            return None
        return get_annotations(self.schema).description

    def format_value(self, value: Any) -> str | None:
        if self.schema is None:
            return None
        return format_with_pretty(value, get_annotations(self.schema))

    def get_field_context(self, field_name: str) -> SchemaContext:
        if self.schema is None:
            return self._derive(None)
        return self._derive(get_field_schema(self.schema, field_name))

    def get_element_context(self) -> SchemaContext:
        if self.schema is None:
            return self._derive(None)
        return self._derive(get_array_element_schema(self.schema))

    def lookup_by_name(self, name: str) -> SchemaNode | None:
        return self.registry.lookup(name)

    def get_schema_for_path(self, path: str) -> SchemaNode | None:
        return self.resolver.resolve(path)

    def get_context_for_path(self, path: str) -> SchemaContext:
        return self._derive(self.resolver.resolve(path))

    def _derive(self, schema: SchemaNode | None) -> SchemaContext:
        return SchemaContext(
            schema=schema,
            root_schema=self.root_schema,
            registry=self.registry,
            resolver=self.resolver,
        )


@dataclass(frozen=True)
class _DefaultSchemaContext(SchemaContext):
    """Context used when no schema was configured; every derivation is itself.

    Shared by every session, so lookups never touch its registry or resolver.
    """

    def get_field_context(self, field_name: str) -> SchemaContext:
        return self

    def get_element_context(self) -> SchemaContext:
        return self

    def get_context_for_path(self, path: str) -> SchemaContext:
        return self

    def get_schema_for_path(self, path: str) -> SchemaNode | None:
        return None

    def lookup_by_name(self, name: str) -> SchemaNode | None:
        return None


DEFAULT_SCHEMA_CONTEXT: SchemaContext = _DefaultSchemaContext(
    schema=None,
    root_schema=None,
    registry=SchemaRegistry(),
    resolver=PathResolver(None),
)


def create_context(
    root_schema: SchemaNode | None = None,
    auxiliary_schemas: Iterable[SchemaNode] = (),
) -> SchemaContext:
    """Build the root context of one inspection session.

    The root schema and every auxiliary schema are registered by identifier
    or title. Without any schema the shared default context is returned.
    """
    auxiliary = tuple(auxiliary_schemas)
    if root_schema is None and not auxiliary:
        return DEFAULT_SCHEMA_CONTEXT

    registry = SchemaRegistry()
    if root_schema is not None:
        registry.register(root_schema)
    for schema in auxiliary:
        registry.register(schema)

    return SchemaContext(
        schema=root_schema,
        root_schema=root_schema,
        registry=registry,
        resolver=PathResolver(root_schema),
    )
