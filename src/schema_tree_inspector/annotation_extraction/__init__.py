"""Annotation extraction exports."""

from .annotation_bundle import EMPTY_ANNOTATIONS, AnnotationBundle
from .annotation_reader import (
    format_with_pretty,
    get_annotations,
    get_annotations_from_node,
    get_display_name,
)
from .node_unwrapping import MAX_UNWRAP_DEPTH, is_nullish_node, unwrap_for_display

__all__ = [
    "AnnotationBundle",
    "EMPTY_ANNOTATIONS",
    "MAX_UNWRAP_DEPTH",
    "format_with_pretty",
    "get_annotations",
    "get_annotations_from_node",
    "get_display_name",
    "is_nullish_node",
    "unwrap_for_display",
]
