"""Single-value labels for the inspection tree."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from schema_tree_inspector.schema_context.context_facade import SchemaContext

ELLIPSIS = "…"


def is_record_value(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence_value(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def type_label(value: Any) -> str:
    return type(value).__name__


def format_plain_value(value: Any) -> str:
    """Schema-free label: containers show their type, scalars their repr."""
    if is_record_value(value):
        return type_label(value)
    if is_sequence_value(value):
        return f"{type_label(value)}({len(value)})"
    return repr(value)


def render_value(context: SchemaContext, value: Any) -> str:
    """Label one value: pretty formatting first, then the schema name of a record."""
    formatted = context.format_value(value)
    if formatted is not None:
        return formatted
    if is_record_value(value):
        display_name = context.get_display_name()
        if display_name:
            return display_name
    return format_plain_value(value)
