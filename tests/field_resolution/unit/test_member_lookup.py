"""Field and element lookup tests."""

from __future__ import annotations

from schema_tree_inspector.field_resolution import get_array_element_schema, get_field_schema
from schema_tree_inspector.schema_nodes.schema_builders import (
    annotate,
    array,
    null_or,
    number,
    record,
    string,
    struct,
    suspend,
    transform,
    tuple_of,
    union,
)


def test_field_schema_returns_unwrapped_property_type() -> None:
    street = annotate(string(), title="Street")
    address = struct(street=null_or(street))

    assert get_field_schema(address, "street") is street


def test_field_schema_unwraps_the_record_first() -> None:
    name = string()
    person = annotate(struct(name=name), title="Person")

    assert get_field_schema(transform(string(), null_or(person)), "name") is name
    assert get_field_schema(suspend(lambda: person), "name") is name


def test_optional_record_members_resolve_to_their_type() -> None:
    nickname = annotate(string(), title="Nickname")
    person = record({"nickname": nickname}, optional=frozenset({"nickname"}))

    assert person.property_signatures[0].is_optional is True
    assert get_field_schema(person, "nickname") is nickname


def test_field_lookup_is_exact_and_first_match_wins() -> None:
    first = string()
    node = struct(Name=first)

    assert get_field_schema(node, "Name") is first
    assert get_field_schema(node, "name") is None
    assert get_field_schema(node, "Nam") is None


def test_field_schema_of_non_record_is_absent() -> None:
    assert get_field_schema(number(), "anything") is None
    assert get_field_schema(array(struct(id=number())), "id") is None
    assert get_field_schema(union(struct(a=string()), struct(b=string())), "a") is None
    assert get_field_schema(None, "a") is None


def test_element_schema_returns_rest_element_type() -> None:
    element = annotate(struct(id=number()), title="Item")

    assert get_array_element_schema(array(element)) is element
    assert get_array_element_schema(array(null_or(element))) is element
    assert get_array_element_schema(null_or(array(element))) is element


def test_fixed_tuple_slots_are_not_addressable() -> None:
    assert get_array_element_schema(tuple_of(string(), number())) is None

    rest = number()
    assert get_array_element_schema(tuple_of(string(), rest=rest)) is rest


def test_element_schema_of_non_sequence_is_absent() -> None:
    assert get_array_element_schema(struct(id=number())) is None
    assert get_array_element_schema(string()) is None
    assert get_array_element_schema(None) is None
