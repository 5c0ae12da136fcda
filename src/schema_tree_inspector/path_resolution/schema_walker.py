"""Resolution of the schema describing one node of the data tree."""

from __future__ import annotations

from collections.abc import Sequence

from schema_tree_inspector.field_resolution.member_lookup import (
    get_array_element_schema,
    get_field_schema,
)
from schema_tree_inspector.schema_nodes.node_models import SchemaNode

from .path_segments import is_index_segment, parse_path_segments


def resolve_schema_for_segments(
    root_schema: SchemaNode | None, segments: Sequence[str]
) -> SchemaNode | None:
    """Walk `segments` from `root_schema`; any miss yields None for the whole path."""
    current = root_schema
    for segment in segments:
        if current is None:
            return None
        if is_index_segment(segment):
            current = get_array_element_schema(current)
        else:
            current = get_field_schema(current, segment)
    return current


def resolve_schema_for_path(root_schema: SchemaNode | None, path: str) -> SchemaNode | None:
    """Return the schema describing the node at `path`, or None when unknown."""
    if root_schema is None:
        return None
    return resolve_schema_for_segments(root_schema, parse_path_segments(path))


class PathResolver:
    """Memoizing path resolution bound to one root schema.

    Results depend only on the root schema and the path string, so cached
    entries never go stale.
    """

    def __init__(self, root_schema: SchemaNode | None) -> None:
        self._root_schema = root_schema
        self._resolved: dict[str, SchemaNode | None] = {}

    def __len__(self) -> int:
        return len(self._resolved)

    @property
    def root_schema(self) -> SchemaNode | None:
        return self._root_schema

    def resolve(self, path: str) -> SchemaNode | None:
        if self._root_schema is None:
            return None
        if path in self._resolved:
            return self._resolved[path]
        resolved = resolve_schema_for_path(self._root_schema, path)
        self._resolved[path] = resolved
        return resolved
