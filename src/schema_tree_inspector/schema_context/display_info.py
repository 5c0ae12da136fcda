"""Display info derived from a schema context for one value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .context_facade import SchemaContext


@dataclass(frozen=True)
class SchemaDisplayInfo:
    """Schema-derived display data for one rendered value."""

    display_name: str | None
    formatted_value: str | None
    has_schema: bool


def describe_node(
    context: SchemaContext, value: Any, field_name: str | None = None
) -> SchemaDisplayInfo:
    """Describe `value` using `context`, or its field context when `field_name` is given."""
    effective = context.get_field_context(field_name) if field_name else context
    return SchemaDisplayInfo(
        display_name=effective.get_display_name(),
        formatted_value=effective.format_value(value),
        has_schema=effective.has_schema,
    )
