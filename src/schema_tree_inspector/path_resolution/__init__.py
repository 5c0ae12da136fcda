"""Path resolution exports."""

from .path_segments import ROOT_PATH, is_index_segment, join_path, parse_path_segments
from .schema_walker import PathResolver, resolve_schema_for_path, resolve_schema_for_segments

__all__ = [
    "ROOT_PATH",
    "PathResolver",
    "is_index_segment",
    "join_path",
    "parse_path_segments",
    "resolve_schema_for_path",
    "resolve_schema_for_segments",
]
