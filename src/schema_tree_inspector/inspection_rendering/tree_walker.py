"""Depth-first rendering of an inspected value into labelled tree lines."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from schema_tree_inspector.configuration.runtime_settings import RenderingSettings
from schema_tree_inspector.path_resolution.path_segments import (
    ROOT_PATH,
    is_index_segment,
    join_path,
    parse_path_segments,
)
from schema_tree_inspector.schema_context.context_facade import SchemaContext

from .object_preview import render_preview
from .value_labels import is_record_value, is_sequence_value, render_value, type_label

_INDENT = "  "


class DataPathError(LookupError):
    """Raised when a tree path does not address a node of the inspected value."""


@dataclass(frozen=True)
class TreeLine:
    """One rendered node of the inspection tree."""

    depth: int
    path: str
    text: str
    description: str | None = None

    def format(self) -> str:
        line = f"{_INDENT * self.depth}{self.text}"
        if self.description:
            return f"{line}  # {self.description}"
        return line


def select_data_at_path(data: Any, path: str) -> Any:
    """Return the part of `data` addressed by `path`."""
    current = data
    for segment in parse_path_segments(path):
        if is_record_value(current) and segment in current:
            current = current[segment]
        elif (
            is_sequence_value(current)
            and is_index_segment(segment)
            and int(segment) < len(current)
        ):
            current = current[int(segment)]
        else:
            raise DataPathError(f"Path {path} does not exist in the inspected data.")
    return current


def render_tree(
    data: Any,
    root_context: SchemaContext,
    settings: RenderingSettings,
    *,
    path: str = ROOT_PATH,
    name: str | None = None,
) -> list[TreeLine]:
    """Render `data` rooted at `path`.

    Only the starting node resolves its context through `path`; members receive
    their field or element context from their parent, so keys containing dots or
    digits never get re-parsed. Paths on the returned lines are for display.
    """
    context = root_context.get_context_for_path(path)
    return list(_walk(data, context, settings, path=path, name=name, depth=0))


def format_tree(lines: list[TreeLine]) -> str:
    return "\n".join(line.format() for line in lines)


def _walk(
    value: Any,
    context: SchemaContext,
    settings: RenderingSettings,
    *,
    path: str,
    name: str | None,
    depth: int,
) -> Iterator[TreeLine]:
    expanded = depth < settings.max_depth and _has_children(value)
    label = (
        _root_label(context, value, settings, expanded)
        if depth == 0
        else _member_label(context, value, settings, expanded)
    )
    text = label if name is None else f"{name}: {label}"
    yield TreeLine(depth=depth, path=path, text=text, description=context.get_description())

    if not expanded:
        return
    for child_name, child_value in _children(value):
        child_context = (
            context.get_field_context(child_name)
            if is_record_value(value)
            else context.get_element_context()
        )
        yield from _walk(
            child_value,
            child_context,
            settings,
            path=join_path(path, child_name),
            name=child_name,
            depth=depth + 1,
        )


def _root_label(
    context: SchemaContext, value: Any, settings: RenderingSettings, expanded: bool
) -> str:
    formatted = context.format_value(value)
    if formatted is not None:
        return formatted
    return _preview_with_name(context, value, settings, expanded)


def _member_label(
    context: SchemaContext, value: Any, settings: RenderingSettings, expanded: bool
) -> str:
    if is_record_value(value):
        return _preview_with_name(context, value, settings, expanded)
    if is_sequence_value(value) and not expanded:
        return render_preview(context, value, settings)
    return render_value(context, value)


def _preview_with_name(
    context: SchemaContext, value: Any, settings: RenderingSettings, expanded: bool
) -> str:
    # Expanded records show only their name since the members follow below.
    if expanded and is_record_value(value):
        return context.get_display_name() or type_label(value)
    return render_preview(context, value, settings)


def _has_children(value: Any) -> bool:
    return (is_record_value(value) or is_sequence_value(value)) and len(value) > 0


def _children(value: Any) -> Iterator[tuple[str, Any]]:
    if is_record_value(value):
        for key, member in value.items():
            yield str(key), member
    else:
        for index, element in enumerate(value):
            yield str(index), element
