"""Inspection use-case tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from schema_tree_inspector.configuration import load_configuration
from schema_tree_inspector.inspection_session import (
    InspectionError,
    InspectionRequest,
    PathDescription,
    build_root_context,
    describe_schema_path,
    execute_inspection,
    list_registered_schemas,
    load_data_document,
)
from schema_tree_inspector.schema_context import DEFAULT_SCHEMA_CONTEXT

_PERSON_SCHEMA = {
    "$id": "Person",
    "type": "object",
    "required": ["name", "address"],
    "properties": {
        "name": {"type": "string", "description": "Full name"},
        "address": {
            "type": "object",
            "title": "Address",
            "properties": {"city": {"type": "string"}},
        },
    },
}


def _write_config(tmp_path: Path, contents: dict) -> Path:
    path = tmp_path / "inspector.json"
    path.write_text(json.dumps(contents), encoding="utf-8")
    return path


def _person_config(tmp_path: Path, **extra: object) -> Path:
    return _write_config(
        tmp_path,
        {"schema": {"json_schema": {"inline": json.dumps(_PERSON_SCHEMA)}}, **extra},
    )


def _write_data(tmp_path: Path) -> Path:
    path = tmp_path / "person.json"
    path.write_text(
        json.dumps({"name": "Ada", "address": {"city": "London"}}), encoding="utf-8"
    )
    return path


def test_execute_inspection_renders_with_configured_schema(tmp_path: Path) -> None:
    request = InspectionRequest(
        data_path=str(_write_data(tmp_path)), config_path=str(_person_config(tmp_path))
    )

    outcome = execute_inspection(request)

    assert outcome.has_schema is True
    assert outcome.render_text().splitlines() == [
        "Person",
        "  name: 'Ada'  # Full name",
        "  address: Address",
        "    city: 'London'",
    ]


def test_execute_inspection_applies_rendering_settings(tmp_path: Path) -> None:
    config_path = _person_config(tmp_path, rendering={"max_depth": 1})
    request = InspectionRequest(data_path=str(_write_data(tmp_path)), config_path=str(config_path))

    outcome = execute_inspection(request)

    assert outcome.render_text().splitlines()[-1] == "  address: Address {city: 'London'}"


def test_execute_inspection_without_configuration_uses_default_context(tmp_path: Path) -> None:
    outcome = execute_inspection(InspectionRequest(data_path=str(_write_data(tmp_path))))

    assert outcome.has_schema is False
    assert outcome.render_text().splitlines()[0] == "dict"


def test_execute_inspection_rejects_unknown_tree_path(tmp_path: Path) -> None:
    request = InspectionRequest(data_path=str(_write_data(tmp_path)), tree_path="$.age")

    with pytest.raises(InspectionError, match="does not exist"):
        execute_inspection(request)


def test_execute_inspection_wraps_configuration_errors(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, {"rendering": {"max_depth": -1}})
    request = InspectionRequest(data_path=str(_write_data(tmp_path)), config_path=str(config_path))

    with pytest.raises(InspectionError, match="greater than zero"):
        execute_inspection(request)


def test_build_root_context_without_schemas_is_default(tmp_path: Path) -> None:
    configuration = load_configuration(_write_config(tmp_path, {}))

    assert build_root_context(configuration) is DEFAULT_SCHEMA_CONTEXT


def test_build_root_context_registers_auxiliary_schemas(tmp_path: Path) -> None:
    config_path = _person_config(
        tmp_path,
        auxiliary_schemas=[
            {"avsc": {"inline": json.dumps({"type": "fixed", "name": "Hash", "size": 16})}}
        ],
    )

    context = build_root_context(load_configuration(config_path))

    assert context.lookup_by_name("Person") is context.root_schema
    assert context.lookup_by_name("Hash") is not None
    assert list_registered_schemas(str(config_path)) == ("Person", "Hash")


def test_describe_schema_path_reports_metadata(tmp_path: Path) -> None:
    config_path = str(_person_config(tmp_path))

    assert describe_schema_path(config_path, "$.address") == PathDescription(
        path="$.address", schema_kind="record", display_name="Address", description=None
    )
    assert describe_schema_path(config_path, "$.name") == PathDescription(
        path="$.name", schema_kind="keyword", display_name=None, description="Full name"
    )
    assert describe_schema_path(config_path, "$.name.0") == PathDescription(
        path="$.name.0", schema_kind=None, display_name=None, description=None
    )


def test_load_data_document_reads_yaml_and_json(tmp_path: Path) -> None:
    yaml_path = tmp_path / "data.yaml"
    yaml_path.write_text("items:\n  - 1\n  - 2\n", encoding="utf-8")

    assert load_data_document(yaml_path) == {"items": [1, 2]}
    assert load_data_document(_write_data(tmp_path)) == {
        "name": "Ada",
        "address": {"city": "London"},
    }


def test_load_data_document_errors(tmp_path: Path) -> None:
    broken = tmp_path / "broken.yaml"
    broken.write_text("a: [1, 2\n", encoding="utf-8")

    with pytest.raises(InspectionError, match="Data file not found"):
        load_data_document(tmp_path / "missing.json")
    with pytest.raises(InspectionError, match="Failed to parse data file"):
        load_data_document(broken)


def test_load_data_document_wraps_decoding_errors(tmp_path: Path) -> None:
    data_path = tmp_path / "data.json"
    data_path.write_bytes(b'{"name": "\xff\xfe"}')

    with pytest.raises(InspectionError, match="Failed to read data file"):
        load_data_document(data_path)
