"""Tests for import boundaries between the schema core and outer layers."""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

_CORE_PACKAGES = (
    "schema_nodes",
    "annotation_extraction",
    "field_resolution",
    "path_resolution",
    "schema_registry",
    "schema_context",
)
_FORBIDDEN_PREFIXES = (
    "yaml",
    "click",
    "schema_tree_inspector.configuration",
    "schema_tree_inspector.schema_management",
    "schema_tree_inspector.inspection_rendering",
    "schema_tree_inspector.inspection_session",
    "schema_tree_inspector.cli",
)


def _package_root() -> Path:
    return Path(__file__).resolve().parents[3] / "src" / "schema_tree_inspector"


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    modules: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            modules.add(node.module)
    return modules


@pytest.mark.parametrize("package", _CORE_PACKAGES)
def test_core_packages_do_not_depend_on_outer_layers(package: str) -> None:
    source_files = sorted((_package_root() / package).glob("*.py"))
    assert source_files, f"Expected sources in {package}"

    for source_file in source_files:
        for module in _imported_modules(source_file):
            for prefix in _FORBIDDEN_PREFIXES:
                assert module != prefix and not module.startswith(f"{prefix}."), (
                    f"{source_file.name} imports {module}"
                )
