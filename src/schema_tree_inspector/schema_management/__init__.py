"""Schema management exports."""

from .schema_models import SchemaDocument
from .schema_translation import (
    SchemaError,
    annotate_for_display,
    load_schema_document,
    pretty_formatter,
    translate_schema,
)

__all__ = [
    "SchemaDocument",
    "SchemaError",
    "annotate_for_display",
    "load_schema_document",
    "pretty_formatter",
    "translate_schema",
]
