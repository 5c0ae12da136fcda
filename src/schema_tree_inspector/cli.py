"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from schema_tree_inspector.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from schema_tree_inspector.inspection_session import (
    InspectionError,
    InspectionRequest,
    describe_schema_path,
    execute_inspection,
    list_registered_schemas,
)
from schema_tree_inspector.path_resolution import ROOT_PATH


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-tree-inspector")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Schema-aware inspection of structured data."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML inspector configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML inspector configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="inspect")
@click.option(
    "--data",
    "data_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON or YAML data file to inspect",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON inspector configuration file",
)
@click.option(
    "--path",
    "tree_path",
    required=False,
    default=ROOT_PATH,
    show_default=True,
    help="Tree path of the node to start rendering from, e.g. $.items.0",
)
def inspect_data(data_path: str, config_path: str | None, tree_path: str) -> None:
    """Print the inspection tree of a data file, enriched by the configured schema."""
    try:
        outcome = execute_inspection(
            InspectionRequest(data_path=data_path, config_path=config_path, tree_path=tree_path)
        )
    except InspectionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(outcome.render_text())


@cli.command(name="describe")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON inspector configuration file",
)
@click.option("--path", "tree_path", required=True, help="Tree path to describe, e.g. $.address")
def describe(config_path: str, tree_path: str) -> None:
    """Show the schema metadata resolved for one tree path."""
    try:
        description = describe_schema_path(config_path, tree_path)
    except InspectionError as exc:
        raise CliError(str(exc)) from exc
    if description.schema_kind is None:
        click.echo(f"{description.path}: no schema")
        return
    click.echo(f"path: {description.path}")
    click.echo(f"kind: {description.schema_kind}")
    click.echo(f"name: {description.display_name or '-'}")
    click.echo(f"description: {description.description or '-'}")


@cli.command(name="list-schemas")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON inspector configuration file",
)
def list_schemas(config_path: str) -> None:
    """List the schema names available for name-based lookups."""
    try:
        names = list_registered_schemas(config_path)
    except InspectionError as exc:
        raise CliError(str(exc)) from exc
    for name in names:
        click.echo(name)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
