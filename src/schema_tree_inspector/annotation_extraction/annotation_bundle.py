"""Annotation bundle entity."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AnnotationBundle:
    """Display metadata read from one schema node."""

    identifier: str | None = None
    title: str | None = None
    description: str | None = None
    pretty: Callable[[Any], Any] | None = None


EMPTY_ANNOTATIONS = AnnotationBundle()
