"""Schema node entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar

IDENTIFIER_ANNOTATION = "identifier"
TITLE_ANNOTATION = "title"
DESCRIPTION_ANNOTATION = "description"
PRETTY_ANNOTATION = "pretty"


class NodeKind(str, Enum):
    """Discriminator of schema node variants."""

    RECORD = "record"
    SEQUENCE = "sequence"
    TRANSFORMATION = "transformation"
    REFINEMENT = "refinement"
    SUSPEND = "suspend"
    UNION = "union"
    LITERAL = "literal"
    UNDEFINED_KEYWORD = "undefined_keyword"
    VOID_KEYWORD = "void_keyword"
    KEYWORD = "keyword"


@dataclass(frozen=True, eq=False, kw_only=True)
class SchemaNode:
    """Structural description of one type.

    Nodes compare and hash by identity so they can key caches without
    walking their (possibly recursive) structure.
    """

    kind: ClassVar[NodeKind]

    annotations: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "annotations", MappingProxyType(dict(self.annotations)))


@dataclass(frozen=True, eq=False)
class PropertySignature:
    """Named member of a record node."""

    name: str
    type: SchemaNode
    is_optional: bool = False


@dataclass(frozen=True, eq=False)
class RecordNode(SchemaNode):
    """Struct/type-literal node with ordered named members."""

    kind: ClassVar[NodeKind] = NodeKind.RECORD

    property_signatures: tuple[PropertySignature, ...] = ()


@dataclass(frozen=True, eq=False)
class SequenceNode(SchemaNode):
    """Tuple/array node.

    `elements` are fixed leading slots; `rest` holds the homogeneous element
    types that follow them.
    """

    kind: ClassVar[NodeKind] = NodeKind.SEQUENCE

    elements: tuple[SchemaNode, ...] = ()
    rest: tuple[SchemaNode, ...] = ()


@dataclass(frozen=True, eq=False)
class TransformationNode(SchemaNode):
    """Encoded-to-decoded transformation between two nodes."""

    kind: ClassVar[NodeKind] = NodeKind.TRANSFORMATION

    from_node: SchemaNode
    to_node: SchemaNode


@dataclass(frozen=True, eq=False)
class RefinementNode(SchemaNode):
    """Constrained view of a base node."""

    kind: ClassVar[NodeKind] = NodeKind.REFINEMENT

    from_node: SchemaNode
    constraints: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, eq=False)
class SuspendNode(SchemaNode):
    """Lazily constructed node, used for self-referential schemas."""

    kind: ClassVar[NodeKind] = NodeKind.SUSPEND

    thunk: Callable[[], SchemaNode]


@dataclass(frozen=True, eq=False)
class UnionNode(SchemaNode):
    kind: ClassVar[NodeKind] = NodeKind.UNION

    types: tuple[SchemaNode, ...] = ()


@dataclass(frozen=True, eq=False)
class LiteralNode(SchemaNode):
    """Single literal value; `None` stands for null."""

    kind: ClassVar[NodeKind] = NodeKind.LITERAL

    literal: str | int | float | bool | None


@dataclass(frozen=True, eq=False)
class UndefinedKeyword(SchemaNode):
    kind: ClassVar[NodeKind] = NodeKind.UNDEFINED_KEYWORD


@dataclass(frozen=True, eq=False)
class VoidKeyword(SchemaNode):
    kind: ClassVar[NodeKind] = NodeKind.VOID_KEYWORD


@dataclass(frozen=True, eq=False)
class KeywordNode(SchemaNode):
    """Terminal node such as string, number or boolean."""

    kind: ClassVar[NodeKind] = NodeKind.KEYWORD

    name: str
