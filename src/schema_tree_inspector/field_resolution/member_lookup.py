"""Field and element schema lookup for record and sequence nodes."""

from __future__ import annotations

from schema_tree_inspector.annotation_extraction.node_unwrapping import unwrap_for_display
from schema_tree_inspector.schema_nodes.node_models import RecordNode, SchemaNode, SequenceNode


def get_field_schema(node: SchemaNode | None, field_name: str) -> SchemaNode | None:
    """Return the display form of the first property named `field_name`."""
    unwrapped = unwrap_for_display(node)
    if not isinstance(unwrapped, RecordNode):
        return None
    for signature in unwrapped.property_signatures:
        if signature.name == field_name:
            return unwrap_for_display(signature.type)
    return None


def get_array_element_schema(node: SchemaNode | None) -> SchemaNode | None:
    """Return the display form of the first rest element of a sequence.

    Fixed leading tuple slots are not addressable here.
    """
    unwrapped = unwrap_for_display(node)
    if not isinstance(unwrapped, SequenceNode) or not unwrapped.rest:
        return None
    return unwrap_for_display(unwrapped.rest[0])
