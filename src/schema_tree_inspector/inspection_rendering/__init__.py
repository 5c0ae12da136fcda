"""Inspection rendering exports."""

from .object_preview import render_preview
from .tree_walker import (
    DataPathError,
    TreeLine,
    format_tree,
    render_tree,
    select_data_at_path,
)
from .value_labels import format_plain_value, render_value

__all__ = [
    "DataPathError",
    "TreeLine",
    "format_plain_value",
    "format_tree",
    "render_preview",
    "render_tree",
    "render_value",
    "select_data_at_path",
]
