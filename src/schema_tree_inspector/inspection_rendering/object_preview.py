"""One-line previews of records and sequences."""

from __future__ import annotations

from typing import Any

from schema_tree_inspector.configuration.runtime_settings import RenderingSettings
from schema_tree_inspector.schema_context.context_facade import SchemaContext

from .value_labels import (
    ELLIPSIS,
    is_record_value,
    is_sequence_value,
    render_value,
    type_label,
)


def render_preview(context: SchemaContext, value: Any, settings: RenderingSettings) -> str:
    """Preview `value` with members labelled through their field or element context."""
    formatted = context.format_value(value)
    if formatted is not None:
        return formatted

    if is_sequence_value(value):
        element_context = context.get_element_context()
        items = [
            render_value(element_context, element)
            for element in value[: settings.array_max_properties]
        ]
        if len(value) > settings.array_max_properties:
            items.append(ELLIPSIS)
        length_prefix = f"({len(value)}) " if value else ""
        return f"{length_prefix}[{', '.join(items)}]"

    if is_record_value(value):
        members = []
        for index, (key, member) in enumerate(value.items()):
            if index == settings.object_max_properties:
                members.append(ELLIPSIS)
                break
            member_label = render_value(context.get_field_context(str(key)), member)
            members.append(f"{key}: {member_label}")
        name = context.get_display_name() or type_label(value)
        name_prefix = "" if name == "dict" else f"{name} "
        return f"{name_prefix}{{{', '.join(members)}}}"

    return render_value(context, value)
