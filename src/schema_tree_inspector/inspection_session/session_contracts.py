"""Inspection session entities."""

from __future__ import annotations

from dataclasses import dataclass

from schema_tree_inspector.inspection_rendering.tree_walker import TreeLine, format_tree
from schema_tree_inspector.path_resolution.path_segments import ROOT_PATH


@dataclass(frozen=True)
class InspectionRequest:
    """Input contract for rendering one data file."""

    data_path: str
    config_path: str | None = None
    tree_path: str = ROOT_PATH


@dataclass(frozen=True)
class InspectionOutcome:
    """Rendered inspection tree."""

    lines: tuple[TreeLine, ...]
    has_schema: bool

    def render_text(self) -> str:
        return format_tree(list(self.lines))


@dataclass(frozen=True)
class PathDescription:
    """Schema metadata resolved for one tree path."""

    path: str
    schema_kind: str | None
    display_name: str | None
    description: str | None
