"""Parsing of inspection tree paths such as `$.items.0.name`."""

from __future__ import annotations

import re

ROOT_PATH = "$"

_INDEX_SEGMENT_PATTERN = re.compile(r"[0-9]+")


def parse_path_segments(path: str) -> list[str]:
    """Split a tree path into its segments; the root path has none."""
    if path == ROOT_PATH:
        return []
    without_root = path[2:] if path.startswith(f"{ROOT_PATH}.") else path[1:]
    return without_root.split(".")


def is_index_segment(segment: str) -> bool:
    """Return True when `segment` consists of ASCII decimal digits only."""
    return _INDEX_SEGMENT_PATTERN.fullmatch(segment) is not None


def join_path(parent: str, segment: str | int) -> str:
    """Append one field name or sequence index to `parent`."""
    return f"{parent}.{segment}"
