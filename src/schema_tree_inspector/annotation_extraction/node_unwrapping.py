"""Unwrapping of non-semantic wrapper nodes before display lookups."""

from __future__ import annotations

from schema_tree_inspector.schema_nodes.node_models import (
    LiteralNode,
    NodeKind,
    RefinementNode,
    SchemaNode,
    SuspendNode,
    TransformationNode,
    UnionNode,
)

MAX_UNWRAP_DEPTH = 64


def is_nullish_node(node: SchemaNode) -> bool:
    """Return True for undefined, void and literal-null nodes."""
    if node.kind in (NodeKind.UNDEFINED_KEYWORD, NodeKind.VOID_KEYWORD):
        return True
    return isinstance(node, LiteralNode) and node.literal is None


def unwrap_for_display(node: SchemaNode | None) -> SchemaNode | None:
    """Resolve `node` to the node that carries its display semantics.

    Transformations resolve to their decoded side, refinements to their base,
    suspended nodes to their deferred result and unions with a single
    non-nullish member to that member. Returns None when a suspended chain
    cycles or nests deeper than MAX_UNWRAP_DEPTH.
    """
    current = node
    visited: set[SchemaNode] = set()
    for _ in range(MAX_UNWRAP_DEPTH):
        if current is None:
            return None
        if isinstance(current, TransformationNode):
            current = current.to_node
        elif isinstance(current, RefinementNode):
            current = current.from_node
        elif isinstance(current, SuspendNode):
            if current in visited:
                return None
            visited.add(current)
            current = current.thunk()
        elif isinstance(current, UnionNode):
            non_nullish = [member for member in current.types if not is_nullish_node(member)]
            if len(non_nullish) != 1:
                return current
            current = non_nullish[0]
        else:
            return current
    return None
