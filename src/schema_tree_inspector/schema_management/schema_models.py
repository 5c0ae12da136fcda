"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed schema definition before translation into schema nodes."""

    schema_type: str
    root: Any
