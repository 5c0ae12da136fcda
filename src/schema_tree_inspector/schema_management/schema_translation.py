"""Schema loading and translation into schema node trees."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from schema_tree_inspector.annotation_extraction.node_unwrapping import is_nullish_node
from schema_tree_inspector.schema_nodes.node_models import (
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
)
from schema_tree_inspector.schema_nodes.schema_builders import with_annotations

from .schema_models import SchemaDocument

if TYPE_CHECKING:
    from schema_tree_inspector.configuration.runtime_settings import SchemaConfig

PRETTY_TEMPLATE_KEY = "x-pretty"

_JSON_KEYWORD_TYPES = ("string", "number", "integer", "boolean")
_JSON_CONSTRAINT_KEYWORDS = (
    "format",
    "pattern",
    "minLength",
    "maxLength",
    "minimum",
    "maximum",
    "exclusiveMinimum",
    "exclusiveMaximum",
    "multipleOf",
    "minItems",
    "maxItems",
    "uniqueItems",
    "minProperties",
    "maxProperties",
)
_AVRO_PRIMITIVES = ("string", "int", "long", "float", "double", "boolean", "bytes")


class SchemaError(Exception):
    """Raised for schema parsing or translation failures."""


def load_schema_document(config: SchemaConfig) -> SchemaDocument:
    """Parse schema text into a structured document."""
    try:
        root = json.loads(config.text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid {config.schema_type} schema: {exc}") from exc

    return SchemaDocument(schema_type=config.schema_type, root=root)


def translate_schema(document: SchemaDocument) -> SchemaNode:
    """Translate a parsed schema document into its schema node tree."""
    if document.schema_type == "json_schema":
        return _JsonSchemaTranslator(document.root).translate_root()
    if document.schema_type == "avsc":
        return _AvroTranslator().translate_root(document.root)
    raise SchemaError(f"Unsupported schema type: {document.schema_type}")


def annotate_for_display(node: SchemaNode, annotations: Mapping[str, Any]) -> SchemaNode:
    """Attach `annotations` to the node that display unwrapping lands on.

    Annotations placed on a transformation, refinement or nullable union would
    be skipped by unwrapping, so they are pushed down to the inner node.
    """
    if not annotations:
        return node
    if isinstance(node, TransformationNode):
        return dataclasses.replace(node, to_node=annotate_for_display(node.to_node, annotations))
    if isinstance(node, RefinementNode):
        return dataclasses.replace(
            node, from_node=annotate_for_display(node.from_node, annotations)
        )
    if isinstance(node, SuspendNode):
        target = node.thunk
        return SuspendNode(thunk=_memoized(lambda: annotate_for_display(target(), annotations)))
    if isinstance(node, UnionNode):
        non_nullish = [member for member in node.types if not is_nullish_node(member)]
        if len(non_nullish) == 1:
            only = non_nullish[0]
            annotated = annotate_for_display(only, annotations)
            return dataclasses.replace(
                node,
                types=tuple(annotated if member is only else member for member in node.types),
            )
    return with_annotations(node, annotations)


def pretty_formatter(template: str) -> Callable[[Any], str]:
    """Build a pretty annotation from a `str.format` template such as `${:.2f}`."""

    def pretty(value: Any) -> str:
        return template.format(value)

    return pretty


def _memoized(factory: Callable[[], SchemaNode]) -> Callable[[], SchemaNode]:
    resolved: list[SchemaNode] = []

    def thunk() -> SchemaNode:
        if not resolved:
            resolved.append(factory())
        return resolved[0]

    return thunk


def _display_annotations(
    node: Mapping[str, Any],
    *,
    identifier: Any = None,
    title: Any = None,
    description: Any = None,
) -> dict[str, Any]:
    annotations: dict[str, Any] = {}
    for key, value in (
        (IDENTIFIER_ANNOTATION, identifier),
        (TITLE_ANNOTATION, title),
        (DESCRIPTION_ANNOTATION, description),
    ):
        if value is None:
            continue
        if not isinstance(value, str):
            raise SchemaError(f"Schema annotation '{key}' must be a string.")
        annotations[key] = value

    template = node.get(PRETTY_TEMPLATE_KEY)
    if template is not None:
        if not isinstance(template, str):
            raise SchemaError(f"Schema annotation '{PRETTY_TEMPLATE_KEY}' must be a string.")
        annotations[PRETTY_ANNOTATION] = pretty_formatter(template)
    return annotations


class _JsonSchemaTranslator:
    """Translate one JSON Schema document; `$ref` targets become suspended nodes."""

    def __init__(self, root: Any) -> None:
        self._root = root
        self._references: dict[str, SuspendNode] = {}
        self._resolved: dict[str, SchemaNode] = {}

    def translate_root(self) -> SchemaNode:
        node = self._translate(self._root)
        # Translate every reachable reference now so errors surface at load time.
        pending = [ref for ref in self._references if ref not in self._resolved]
        while pending:
            for ref in pending:
                self._references[ref].thunk()
            pending = [ref for ref in self._references if ref not in self._resolved]
        return node

    def _translate(self, node: Any, *, definition_name: str | None = None) -> SchemaNode:
        if node is True:
            return KeywordNode(name="unknown")
        if node is False:
            return KeywordNode(name="never")
        if not isinstance(node, Mapping):
            raise SchemaError("JSON schema nodes must be objects.")

        identifier = node.get("$id", definition_name)
        annotations = _display_annotations(
            node,
            identifier=identifier,
            title=node.get("title"),
            description=node.get("description"),
        )

        if "$ref" in node:
            return annotate_for_display(self._reference(node["$ref"]), annotations)

        translated = annotate_for_display(self._translate_shape(node), annotations)
        constraints = {key: node[key] for key in _JSON_CONSTRAINT_KEYWORDS if key in node}
        if constraints:
            return RefinementNode(from_node=translated, constraints=constraints)
        return translated

    def _translate_shape(self, node: Mapping[str, Any]) -> SchemaNode:
        if "const" in node:
            return _literal(node["const"])
        if "enum" in node:
            values = node["enum"]
            if not isinstance(values, Sequence) or isinstance(values, str):
                raise SchemaError("JSON schema enum must be a list.")
            return UnionNode(types=tuple(_literal(value) for value in values))
        for combinator in ("anyOf", "oneOf"):
            if combinator in node:
                return UnionNode(types=tuple(self._translate_members(node[combinator], combinator)))
        if "allOf" in node:
            return self._translate_all_of(node["allOf"])

        node_types = _json_schema_types(node)
        non_null = [value for value in node_types if value != "null"]
        if node_types and not non_null:
            return LiteralNode(literal=None)
        if len(non_null) > 1:
            members = [self._translate_typed(node, value) for value in non_null]
        else:
            members = [self._translate_typed(node, non_null[0] if non_null else None)]
        if "null" in node_types:
            members.append(LiteralNode(literal=None))
        if len(members) == 1:
            return members[0]
        return UnionNode(types=tuple(members))

    def _translate_typed(self, node: Mapping[str, Any], node_type: str | None) -> SchemaNode:
        if node_type == "object" or (node_type is None and "properties" in node):
            return self._translate_object(node)
        if node_type == "array" or (node_type is None and "items" in node):
            return self._translate_array(node)
        if node_type in _JSON_KEYWORD_TYPES:
            return KeywordNode(name=node_type)
        if node_type is None:
            return KeywordNode(name="unknown")
        raise SchemaError(f"Unsupported JSON schema type: {node_type}")

    def _translate_object(self, node: Mapping[str, Any]) -> RecordNode:
        properties = node.get("properties", {})
        if not isinstance(properties, Mapping):
            raise SchemaError("JSON schema properties must be an object.")
        required = node.get("required", [])
        if not isinstance(required, Sequence) or isinstance(required, str):
            raise SchemaError("JSON schema required must be a list.")

        signatures = []
        for name, child in properties.items():
            translated = self._translate(child)
            if name in required:
                signatures.append(PropertySignature(name=name, type=translated))
            else:
                signatures.append(
                    PropertySignature(
                        name=name,
                        type=UnionNode(types=(translated, UndefinedKeyword())),
                        is_optional=True,
                    )
                )
        return RecordNode(property_signatures=tuple(signatures))

    def _translate_array(self, node: Mapping[str, Any]) -> SequenceNode:
        prefix_items = node.get("prefixItems", [])
        items = node.get("items")
        if isinstance(items, Sequence) and not isinstance(items, str):
            # Draft-04 tuple form.
            prefix_items, items = items, node.get("additionalItems")
        elements = tuple(self._translate_members(prefix_items, "prefixItems"))
        if items is None or items is False:
            return SequenceNode(elements=elements)
        return SequenceNode(elements=elements, rest=(self._translate(items),))

    def _translate_all_of(self, members: Any) -> SchemaNode:
        translated = self._translate_members(members, "allOf")
        if len(translated) == 1:
            return translated[0]
        signatures: list[PropertySignature] = []
        for member in translated:
            if not isinstance(member, RecordNode):
                raise SchemaError("JSON schema allOf members must all be objects.")
            signatures.extend(member.property_signatures)
        return RecordNode(property_signatures=tuple(signatures))

    def _translate_members(self, members: Any, keyword: str) -> list[SchemaNode]:
        if not isinstance(members, Sequence) or isinstance(members, str):
            raise SchemaError(f"JSON schema {keyword} must be a list.")
        return [self._translate(member) for member in members]

    def _reference(self, ref: Any) -> SuspendNode:
        if not isinstance(ref, str):
            raise SchemaError("JSON schema $ref must be a string.")
        if ref in self._references:
            return self._references[ref]

        target = _resolve_json_pointer(self._root, ref)
        name = _reference_name(ref)

        def resolve() -> SchemaNode:
            if ref not in self._resolved:
                self._resolved[ref] = self._translate(target, definition_name=name)
            return self._resolved[ref]

        suspended = SuspendNode(thunk=resolve)
        self._references[ref] = suspended
        return suspended


def _json_schema_types(node: Mapping[str, Any]) -> tuple[str, ...]:
    node_type = node.get("type")
    if isinstance(node_type, list):
        return tuple(value for value in node_type if isinstance(value, str))
    if isinstance(node_type, str):
        return (node_type,)
    return ()


def _resolve_json_pointer(root: Any, ref: str) -> Any:
    if not ref.startswith("#"):
        raise SchemaError(f"Only local $ref values are supported: {ref}")
    pointer = ref[1:]
    current = root
    if not pointer:
        return current
    for raw_part in pointer.lstrip("/").split("/"):
        part = raw_part.replace("~1", "/").replace("~0", "~")
        if not isinstance(current, Mapping) or part not in current:
            raise SchemaError(f"Unresolvable $ref: {ref}")
        current = current[part]
    return current


def _reference_name(ref: str) -> str | None:
    pointer = ref[1:].strip("/")
    if not pointer:
        return None
    return pointer.split("/")[-1].replace("~1", "/").replace("~0", "~")


def _literal(value: Any) -> LiteralNode:
    if value is not None and not isinstance(value, (str, int, float, bool)):
        raise SchemaError("Only scalar literal values are supported.")
    return LiteralNode(literal=value)


class _AvroTranslator:
    """Translate one Avro schema; named-type references become suspended nodes."""

    def __init__(self) -> None:
        self._named: dict[str, SchemaNode] = {}
        self._references: dict[str, SuspendNode] = {}

    def translate_root(self, schema: Any) -> SchemaNode:
        node = self._translate(schema, namespace=None)
        for full_name in self._references:
            self._lookup(full_name)
        return node

    def _translate(self, schema: Any, *, namespace: str | None) -> SchemaNode:
        if isinstance(schema, str):
            if schema == "null":
                return LiteralNode(literal=None)
            if schema in _AVRO_PRIMITIVES:
                return KeywordNode(name=schema)
            return self._reference(_full_name(schema, namespace))
        if isinstance(schema, list):
            return UnionNode(
                types=tuple(self._translate(member, namespace=namespace) for member in schema)
            )
        if isinstance(schema, Mapping):
            return self._translate_complex(schema, namespace=namespace)
        raise SchemaError("Unsupported Avro schema segment.")

    def _translate_complex(self, schema: Mapping[str, Any], *, namespace: str | None) -> SchemaNode:
        avro_type = schema.get("type")
        annotations = _display_annotations(schema, description=schema.get("doc"))
        if isinstance(avro_type, (list, Mapping)):
            inner = self._translate(avro_type, namespace=namespace)
            return annotate_for_display(inner, annotations)

        if avro_type in ("record", "error"):
            return self._translate_record(schema, namespace=namespace, annotations=annotations)
        if avro_type == "enum":
            symbols = schema.get("symbols")
            if not isinstance(symbols, Sequence) or isinstance(symbols, str):
                raise SchemaError("Avro enum requires symbols.")
            node: SchemaNode = UnionNode(
                types=tuple(LiteralNode(literal=symbol) for symbol in symbols)
            )
            return self._register_named(schema, node, namespace=namespace, annotations=annotations)
        if avro_type == "fixed":
            return self._register_named(
                schema, KeywordNode(name="fixed"), namespace=namespace, annotations=annotations
            )
        if avro_type == "array":
            if "items" not in schema:
                raise SchemaError("Avro array requires items.")
            element = self._translate(schema["items"], namespace=namespace)
            return with_annotations(SequenceNode(rest=(element,)), annotations)
        if avro_type == "map":
            return with_annotations(KeywordNode(name="map"), annotations)
        if isinstance(avro_type, str):
            base = self._translate(avro_type, namespace=namespace)
            logical_type = schema.get("logicalType")
            if isinstance(logical_type, str):
                return TransformationNode(
                    from_node=base,
                    to_node=with_annotations(KeywordNode(name=logical_type), annotations),
                )
            return annotate_for_display(base, annotations)
        raise SchemaError("Unsupported Avro schema segment.")

    def _translate_record(
        self,
        schema: Mapping[str, Any],
        *,
        namespace: str | None,
        annotations: dict[str, Any],
    ) -> SchemaNode:
        record_fields = schema.get("fields")
        if not isinstance(record_fields, Sequence) or isinstance(record_fields, str):
            raise SchemaError("Avro record requires fields.")
        record_namespace = _record_namespace(schema, namespace)

        signatures = []
        for field in record_fields:
            if not isinstance(field, Mapping) or "name" not in field:
                raise SchemaError("Avro field definitions must include a name.")
            field_type = self._translate(field.get("type"), namespace=record_namespace)
            field_annotations = _display_annotations(field, description=field.get("doc"))
            signatures.append(
                PropertySignature(
                    name=field["name"], type=annotate_for_display(field_type, field_annotations)
                )
            )
        node = RecordNode(property_signatures=tuple(signatures))
        return self._register_named(schema, node, namespace=namespace, annotations=annotations)

    def _register_named(
        self,
        schema: Mapping[str, Any],
        node: SchemaNode,
        *,
        namespace: str | None,
        annotations: dict[str, Any],
    ) -> SchemaNode:
        name = schema.get("name")
        if not isinstance(name, str) or not name:
            raise SchemaError("Avro named types require a name.")
        named = with_annotations(node, {IDENTIFIER_ANNOTATION: name, **annotations})
        full_name = _full_name(name, _record_namespace(schema, namespace))
        self._named[full_name] = named
        self._named.setdefault(name, named)
        return named

    def _reference(self, full_name: str) -> SuspendNode:
        if full_name not in self._references:
            self._references[full_name] = SuspendNode(thunk=lambda: self._lookup(full_name))
        return self._references[full_name]

    def _lookup(self, full_name: str) -> SchemaNode:
        if full_name in self._named:
            return self._named[full_name]
        short_name = full_name.rsplit(".", 1)[-1]
        if short_name in self._named:
            return self._named[short_name]
        raise SchemaError(f"Unknown Avro named type: {full_name}")


def _record_namespace(schema: Mapping[str, Any], namespace: str | None) -> str | None:
    explicit = schema.get("namespace")
    if isinstance(explicit, str) and explicit:
        return explicit
    name = schema.get("name")
    if isinstance(name, str) and "." in name:
        return name.rsplit(".", 1)[0]
    return namespace


def _full_name(name: str, namespace: str | None) -> str:
    if "." in name or not namespace:
        return name
    return f"{namespace}.{name}"
