"""Schema context exports."""

from .context_facade import DEFAULT_SCHEMA_CONTEXT, SchemaContext, create_context
from .display_info import SchemaDisplayInfo, describe_node

__all__ = [
    "DEFAULT_SCHEMA_CONTEXT",
    "SchemaContext",
    "SchemaDisplayInfo",
    "create_context",
    "describe_node",
]
