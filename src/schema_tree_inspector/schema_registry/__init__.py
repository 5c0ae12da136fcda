"""Schema registry exports."""

from .registry import SchemaRegistry, create_schema_registry, lookup_schema, register_schema

__all__ = [
    "SchemaRegistry",
    "create_schema_registry",
    "lookup_schema",
    "register_schema",
]
