"""CLI entry point for apidoc-swagger."""

import logging
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from apidoc_swagger.config import ConversionConfig, load_config
from apidoc_swagger.generator.context import ConversionContext
from apidoc_swagger.generator.document import to_swagger
from apidoc_swagger.generator.writer import write_document
from apidoc_swagger.parser.apidoc import ApidocFormatError, parse_api_data, parse_project
from apidoc_swagger.parser.base import ProjectInfo
from apidoc_swagger.parser.detect import find_apidoc_files


def _resolve_inputs(doc_path: Path, project_path: Path | None) -> tuple[Path, Path | None]:
    """Find api_data/api_project files when given an apiDoc output directory."""
    if not doc_path.is_dir():
        return doc_path, project_path

    data_file, found_project = find_apidoc_files(doc_path)
    if data_file is None:
        raise click.ClickException(f"No api_data file found in {doc_path}")
    return data_file, project_path or found_project


def _build_config(
    config_path: Path | None, no_definitions: bool, ignore_groups: tuple[str, ...]
) -> ConversionConfig:
    config = load_config(config_path) if config_path else ConversionConfig()
    updates = {}
    if no_definitions:
        updates["generate_definitions"] = False
    if ignore_groups:
        updates["ignored_group_names"] = [*config.ignored_group_names, *ignore_groups]
    return config.model_copy(update=updates)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log conversion details.")
def main(verbose: bool):
    """Convert apiDoc output into Swagger 2.0 documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the Swagger document.")
@click.option("--project", "project_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="api_project.json with title, version and url.")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML/JSON conversion settings.")
@click.option("--no-definitions", is_flag=True, help="Do not turn custom parameter groups into shared definitions.")
@click.option("--ignore-group", "ignore_groups", multiple=True, help="Parameter group kept out of shared definitions (repeatable).")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format.")
def convert(
    doc_path: Path,
    output: Path,
    project_path: Path | None,
    config_path: Path | None,
    no_definitions: bool,
    ignore_groups: tuple[str, ...],
    fmt: str,
):
    """Convert apiDoc api_data.json (or an apiDoc output directory) to Swagger."""
    data_path, project_path = _resolve_inputs(doc_path, project_path)

    try:
        config = _build_config(config_path, no_definitions, ignore_groups)
        click.echo(f"Parsing {data_path}...")
        endpoints = parse_api_data(data_path)
        project = parse_project(project_path) if project_path else ProjectInfo()
    except (ApidocFormatError, ValidationError, yaml.YAMLError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Found {len(endpoints)} endpoints.")

    context = ConversionContext(config)
    document = to_swagger(endpoints, project, config, context)
    used_fmt = write_document(document, output, fmt)

    for diagnostic in context.diagnostics:
        click.echo(f"  Warning: {diagnostic.endpoint or '<unnamed>'}: {diagnostic.message}", err=True)
    click.echo(
        f"Wrote {len(document['paths'])} paths and {len(document['definitions'])} definitions "
        f"to {output} ({used_fmt})"
    )
