"""Name-based schema index."""

from __future__ import annotations

from collections.abc import Iterator

from schema_tree_inspector.annotation_extraction.annotation_reader import get_annotations
from schema_tree_inspector.schema_nodes.node_models import SchemaNode


class SchemaRegistry:
    """Best-effort mapping from identifier or title to schema node.

    Populated once per inspection session and only read afterwards.
    """

    def __init__(self) -> None:
        self._schemas: dict[str, SchemaNode] = {}

    def register(self, schema: SchemaNode, name: str | None = None) -> None:
        """Index `schema` under `name`, its identifier or its title; last write wins."""
        annotations = get_annotations(schema)
        if name is not None:
            key: str | None = name
        elif annotations.identifier is not None:
            key = annotations.identifier
        else:
            key = annotations.title
        if key:
            self._schemas[key] = schema

    def lookup(self, name: str) -> SchemaNode | None:
        return self._schemas.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(self._schemas)

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)


def create_schema_registry() -> SchemaRegistry:
    return SchemaRegistry()


def register_schema(registry: SchemaRegistry, schema: SchemaNode, name: str | None = None) -> None:
    registry.register(schema, name)


def lookup_schema(registry: SchemaRegistry, name: str) -> SchemaNode | None:
    return registry.lookup(name)
