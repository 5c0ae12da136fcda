"""Annotation extraction and display helpers."""

from __future__ import annotations

from typing import Any

from schema_tree_inspector.schema_nodes.node_models import (
    DESCRIPTION_ANNOTATION,
    IDENTIFIER_ANNOTATION,
    PRETTY_ANNOTATION,
    TITLE_ANNOTATION,
    SchemaNode,
)

from .annotation_bundle import EMPTY_ANNOTATIONS, AnnotationBundle
from .node_unwrapping import unwrap_for_display


def get_annotations_from_node(node: SchemaNode) -> AnnotationBundle:
    """Read the well-known annotation keys of `node` without unwrapping it."""
    annotations = node.annotations
    pretty = annotations.get(PRETTY_ANNOTATION)
    return AnnotationBundle(
        identifier=_optional_text(annotations.get(IDENTIFIER_ANNOTATION)),
        title=_optional_text(annotations.get(TITLE_ANNOTATION)),
        description=_optional_text(annotations.get(DESCRIPTION_ANNOTATION)),
        pretty=pretty if callable(pretty) else None,
    )


def get_annotations(node: SchemaNode | None) -> AnnotationBundle:
    """Extract annotations from the display form of `node`."""
    unwrapped = unwrap_for_display(node)
    if unwrapped is None:
        return EMPTY_ANNOTATIONS
    return get_annotations_from_node(unwrapped)


def get_display_name(annotations: AnnotationBundle) -> str | None:
    """Prefer the title, fall back to the identifier."""
    if annotations.title is not None:
        return annotations.title
    return annotations.identifier


def format_with_pretty(value: Any, annotations: AnnotationBundle) -> str | None:
    """Format `value` with the pretty annotation when it yields a string."""
    if annotations.pretty is None:
        return None
    try:
        result = annotations.pretty(value)
    except Exception:  # pylint: disable=broad-exception-caught
        return None
    # Some pretty annotations are hooks returning callables, not formatters.
    if isinstance(result, str):
        return result
    return None


def _optional_text(value: Any) -> str | None:
    return value if isinstance(value, str) else None
