"""Constructors for schema node trees."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from typing import Any

from .node_models import (
    DESCRIPTION_ANNOTATION,
    IDENTIFIER_ANNOTATION,
    PRETTY_ANNOTATION,
    TITLE_ANNOTATION,
    KeywordNode,
    LiteralNode,
    PropertySignature,
    RecordNode,
    RefinementNode,
    SchemaNode,
    SequenceNode,
    SuspendNode,
    TransformationNode,
    UndefinedKeyword,
    UnionNode,
    VoidKeyword,
)


def string() -> KeywordNode:
    return KeywordNode(name="string")


def number() -> KeywordNode:
    return KeywordNode(name="number")


def boolean() -> KeywordNode:
    return KeywordNode(name="boolean")


def keyword(name: str) -> KeywordNode:
    return KeywordNode(name=name)


def undefined() -> UndefinedKeyword:
    return UndefinedKeyword()


def void() -> VoidKeyword:
    return VoidKeyword()


def null() -> LiteralNode:
    return LiteralNode(literal=None)


def literal(value: str | int | float | bool | None) -> LiteralNode:
    return LiteralNode(literal=value)


def struct(**fields: SchemaNode) -> RecordNode:
    """Build a record whose members keep keyword-argument order."""
    return RecordNode(
        property_signatures=tuple(
            PropertySignature(name=name, type=node) for name, node in fields.items()
        )
    )


def record(
    signatures: Mapping[str, SchemaNode], *, optional: frozenset[str] = frozenset()
) -> RecordNode:
    """Build a record from a mapping; names in `optional` become `T | undefined`."""
    property_signatures = []
    for name, node in signatures.items():
        if name in optional:
            property_signatures.append(
                PropertySignature(name=name, type=optional_of(node), is_optional=True)
            )
        else:
            property_signatures.append(PropertySignature(name=name, type=node))
    return RecordNode(property_signatures=tuple(property_signatures))


def array(element: SchemaNode) -> SequenceNode:
    return SequenceNode(rest=(element,))


def tuple_of(*elements: SchemaNode, rest: SchemaNode | None = None) -> SequenceNode:
    return SequenceNode(elements=tuple(elements), rest=(rest,) if rest is not None else ())


def union(*members: SchemaNode) -> UnionNode:
    return UnionNode(types=tuple(members))


def null_or(member: SchemaNode) -> UnionNode:
    return UnionNode(types=(member, null()))


def optional_of(member: SchemaNode) -> UnionNode:
    return UnionNode(types=(member, undefined()))


def suspend(thunk: Callable[[], SchemaNode]) -> SuspendNode:
    return SuspendNode(thunk=thunk)


def transform(from_node: SchemaNode, to_node: SchemaNode) -> TransformationNode:
    return TransformationNode(from_node=from_node, to_node=to_node)


def refine(from_node: SchemaNode, **constraints: Any) -> RefinementNode:
    return RefinementNode(from_node=from_node, constraints=constraints)


def annotate(
    node: SchemaNode,
    *,
    identifier: str | None = None,
    title: str | None = None,
    description: str | None = None,
    pretty: Callable[[Any], Any] | None = None,
) -> SchemaNode:
    """Return a copy of `node` with the given annotations merged in."""
    updates = {
        key: value
        for key, value in (
            (IDENTIFIER_ANNOTATION, identifier),
            (TITLE_ANNOTATION, title),
            (DESCRIPTION_ANNOTATION, description),
            (PRETTY_ANNOTATION, pretty),
        )
        if value is not None
    }
    return with_annotations(node, updates)


def with_annotations(node: SchemaNode, updates: Mapping[str, Any]) -> SchemaNode:
    if not updates:
        return node
    merged = {**node.annotations, **updates}
    return dataclasses.replace(node, annotations=merged)
