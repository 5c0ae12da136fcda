"""Field resolution exports."""

from .member_lookup import get_array_element_schema, get_field_schema

__all__ = ["get_array_element_schema", "get_field_schema"]
