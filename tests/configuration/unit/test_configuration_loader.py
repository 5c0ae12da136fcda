"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from schema_tree_inspector.configuration.loader import ConfigurationError, load_configuration
from schema_tree_inspector.configuration.runtime_settings import RenderingSettings

_AVRO_SCHEMA = json.dumps(
    {
        "type": "record",
        "name": "Person",
        "fields": [{"name": "name", "type": "string"}],
    }
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_inline_schema_and_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "inspector.yaml",
        f"""
schema:
  avsc:
    inline: '{_AVRO_SCHEMA}'
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.schema is not None
    assert configuration.schema.schema_type == "avsc"
    assert configuration.schema.text == _AVRO_SCHEMA
    assert configuration.schema.source_path is None
    assert configuration.auxiliary_schemas == ()
    assert configuration.rendering == RenderingSettings(
        max_depth=8, array_max_properties=10, object_max_properties=5
    )


def test_loads_json_configuration_with_schema_path(tmp_path: Path) -> None:
    schema_path = _write_file(
        tmp_path / "schema.json",
        json.dumps({"type": "object", "properties": {"name": {"type": "string"}}}),
    )
    config_path = _write_file(
        tmp_path / "inspector.json",
        json.dumps(
            {
                "schema": {"json_schema": {"path": schema_path.name}},
                "rendering": {"max_depth": 3, "object_max_properties": 2},
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.schema is not None
    assert configuration.schema.schema_type == "json_schema"
    assert configuration.schema.text == schema_path.read_text(encoding="utf-8")
    assert configuration.schema.source_path == schema_path
    assert configuration.rendering.max_depth == 3
    assert configuration.rendering.array_max_properties == 10
    assert configuration.rendering.object_max_properties == 2


def test_empty_configuration_has_no_schema(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "inspector.yaml", "")

    configuration = load_configuration(config_path)

    assert configuration.schema is None
    assert configuration.auxiliary_schemas == ()
    assert configuration.rendering == RenderingSettings()


def test_loads_auxiliary_schemas(tmp_path: Path) -> None:
    _write_file(tmp_path / "money.json", json.dumps({"title": "Money", "type": "number"}))
    config_path = _write_file(
        tmp_path / "inspector.yaml",
        """
auxiliary_schemas:
  - json_schema:
      path: money.json
  - avsc:
      inline: '"string"'
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.schema is None
    assert [schema.schema_type for schema in configuration.auxiliary_schemas] == [
        "json_schema",
        "avsc",
    ]
    assert configuration.auxiliary_schemas[0].source_path == (tmp_path / "money.json").resolve()


def test_missing_configuration_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- just\n- a list\n", "root must be a mapping"),
        ("schema: nope\n", "Configuration section 'schema' is required"),
        ("schema: {}\n", "exactly one schema type"),
        (
            "schema:\n  avsc: '\"string\"'\n  json_schema: '{}'\n",
            "exactly one schema type",
        ),
        ("schema:\n  json_schema:\n    inline: '{}'\n    path: x.json\n", "both inline and path"),
        ("schema:\n  json_schema:\n    path: missing.json\n", "Schema file not found"),
        ("schema:\n  json_schema: {}\n", "exactly one schema type"),
        ("schema:\n  json_schema:\n    other: 1\n", "either inline or path"),
        ("schema:\n  json_schema: '   '\n", "Schema text cannot be empty"),
        ("auxiliary_schemas: money.json\n", "auxiliary_schemas must be a list"),
        ("auxiliary_schemas:\n  - {}\n", r"auxiliary_schemas\[0\] must provide"),
        ("rendering: 3\n", "Configuration section 'rendering' is required"),
        ("rendering:\n  max_depth: 0\n", "rendering.max_depth must be greater than zero"),
        ("rendering:\n  max_depth: true\n", "rendering.max_depth must be an integer"),
        (
            "rendering:\n  array_max_properties: many\n",
            "rendering.array_max_properties must be an integer",
        ),
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "inspector.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


def test_untranslatable_schema_raises_configuration_error(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "inspector.yaml",
        """
schema:
  json_schema:
    inline: '{"$ref": "#/$defs/Missing"}'
""",
    )

    with pytest.raises(ConfigurationError, match="Unresolvable"):
        load_configuration(config_path)


def test_invalid_schema_json_raises_configuration_error(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "inspector.yaml",
        """
schema:
  avsc:
    inline: '{not json'
""",
    )

    with pytest.raises(ConfigurationError, match="Invalid avsc schema"):
        load_configuration(config_path)


def test_undecodable_configuration_file_raises_configuration_error(tmp_path: Path) -> None:
    config_path = tmp_path / "inspector.yaml"
    config_path.write_bytes(b"schema: \xff\xfe\n")

    with pytest.raises(ConfigurationError, match="Failed to read configuration file") as excinfo:
        load_configuration(config_path)

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_undecodable_schema_file_raises_configuration_error(tmp_path: Path) -> None:
    (tmp_path / "schema.json").write_bytes(b'{"title": "\xff"}')
    config_path = _write_file(
        tmp_path / "inspector.yaml", "schema:\n  json_schema:\n    path: schema.json\n"
    )

    with pytest.raises(ConfigurationError, match="Failed to read schema file"):
        load_configuration(config_path)
