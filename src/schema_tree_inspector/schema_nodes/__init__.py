"""Schema node exports."""

from .node_models import (
    DESCRIPTION_ANNOTATION,
    IDENTIFIER_ANNOTATION,
    PRETTY_ANNOTATION,
    TITLE_ANNOTATION,
    KeywordNode,
    LiteralNode,
    NodeKind,
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

__all__ = [
    "DESCRIPTION_ANNOTATION",
    "IDENTIFIER_ANNOTATION",
    "PRETTY_ANNOTATION",
    "TITLE_ANNOTATION",
    "KeywordNode",
    "LiteralNode",
    "NodeKind",
    "PropertySignature",
    "RecordNode",
    "RefinementNode",
    "SchemaNode",
    "SequenceNode",
    "SuspendNode",
    "TransformationNode",
    "UndefinedKeyword",
    "UnionNode",
    "VoidKeyword",
]
