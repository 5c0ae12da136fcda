"""Inspection session exports."""

from .inspection_use_case import (
    InspectionError,
    build_root_context,
    describe_schema_path,
    execute_inspection,
    list_registered_schemas,
    load_data_document,
)
from .session_contracts import InspectionOutcome, InspectionRequest, PathDescription

__all__ = [
    "InspectionError",
    "InspectionOutcome",
    "InspectionRequest",
    "PathDescription",
    "build_root_context",
    "describe_schema_path",
    "execute_inspection",
    "list_registered_schemas",
    "load_data_document",
]
