"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "inspector.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Inspector configuration template for schema-tree-inspector.
# Every section is optional; without a schema the inspector renders plain values.

schema:
  # Choose exactly one schema type (avsc or json_schema) for the inspected data.
  json_schema:
    # Provide either inline schema JSON text or a schema path relative to this file.
    path: "schema.json"
    # inline: "<OPTIONAL>"
  # avsc:
  #   inline: "<OPTIONAL>"
  #   path: "<OPTIONAL>"

# Extra schemas registered by identifier or title for name-based lookups.
auxiliary_schemas: []
#  - avsc:
#      path: "address.avsc"

rendering:
  max_depth: 8
  array_max_properties: 10
  object_max_properties: 5
"""


def build_placeholder_configuration() -> str:
    """Build an inspector configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
