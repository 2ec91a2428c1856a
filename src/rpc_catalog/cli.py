"""CLI entry point for rpc-catalog."""

from datetime import date
from pathlib import Path

import click

from rpc_catalog.catalog.validator import validate_catalogue
from rpc_catalog.catalog.writer import write_catalogue
from rpc_catalog.config import Settings, load_settings
from rpc_catalog.errors import ConfigError, FetchError
from rpc_catalog.fetch import fetch_document, load_document
from rpc_catalog.logging_config import setup_logging
from rpc_catalog.parser.categories import classify
from rpc_catalog.parser.tree import DocumentNode
from rpc_catalog.pipeline import extract_catalogue


def _load_config(config_path: Path | None) -> Settings:
    if config_path is None:
        return Settings()
    try:
        return load_settings(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


def _load_doc(settings: Settings, file_path: Path | None) -> DocumentNode:
    """Load the document from a saved page, or fetch it."""
    try:
        if file_path is not None:
            return load_document(file_path)
        return fetch_document(settings.source_url, timeout=settings.timeout)
    except FetchError as e:
        raise click.ClickException(str(e)) from e


@click.group()
def main():
    """RPC Catalog: extract a typed method catalogue from RPC reference pages."""
    pass


@main.command()
@click.option("--url", default=None, help="Reference page URL (overrides the config file).")
@click.option("--file", "file_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Read a saved copy of the page instead of fetching.")
@click.option("-o", "--output", default=None, type=click.Path(file_okay=False, path_type=Path), help="Output directory for the JSON files.")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML settings file.")
@click.option("--details/--no-details", default=None, help="Capture descriptions, response samples and the name index.")
@click.option("--no-date", is_flag=True, default=False, help="Do not add the run date to output file names.")
@click.option("--log-level", default="INFO", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False), help="Logging level.")
@click.option("--log-file", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Also write log records to this file.")
def extract(
    url: str | None,
    file_path: Path | None,
    output: Path | None,
    config_path: Path | None,
    details: bool | None,
    no_date: bool,
    log_level: str,
    log_file: Path | None,
):
    """Extract the method catalogue and write it as JSON."""
    setup_logging(log_level, log_file)
    settings = _load_config(config_path)

    overrides = {}
    if url is not None:
        overrides["source_url"] = url
    if output is not None:
        overrides["output_dir"] = output
    if details is not None:
        overrides["capture_details"] = details
    if no_date:
        overrides["date_suffix"] = False
    if overrides:
        settings = settings.model_copy(update=overrides)

    source = file_path or settings.source_url
    click.echo(f"Extracting methods from {source}...")
    document = _load_doc(settings, file_path)
    catalogue = extract_catalogue(document, settings)

    errors = validate_catalogue(catalogue)
    if errors:
        for key, message in errors.items():
            click.echo(f"  {key}: {message}", err=True)
        raise click.ClickException("Extracted catalogue is inconsistent, nothing written.")

    click.echo(f"Found {len(catalogue)} methods")

    run_date = date.today() if settings.date_suffix else None
    paths = write_catalogue(
        catalogue,
        settings.output_dir,
        run_date=run_date,
        include_names=settings.capture_details,
    )
    for path in paths:
        click.echo(f"  Created {path}")


@main.command(name="classify")
@click.argument("names", nargs=-1, required=True)
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML settings file.")
def classify_cmd(names: tuple[str, ...], config_path: Path | None):
    """Print the category assigned to each method name."""
    settings = _load_config(config_path)
    for name in names:
        click.echo(f"{name}: {classify(name, settings.category_rules).value}")
