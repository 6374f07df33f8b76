"""Command-line interface for httpconv."""

from pathlib import Path

import click
from loguru import logger
from rich.console import Console

from ..core.conversion_report import EXIT_FATAL, ConversionReport
from ..core.errors import ConfigurationError, ConversionError
from ..file_io.collection_importer import CollectionImporter, ImportConfig
from ..file_io.directory_exporter import DirectoryExporter, ExportConfig
from ..utils.constants import DEFAULT_CONFIG_PATH, DEFAULT_LOG_LEVEL
from ..utils.helpers import build_section_config, config_section, load_config, setup_logging


def _finish(ctx: click.Context, report: ConversionReport) -> None:
    """Print the run summary and exit with the report's status."""
    report.print_summary(Console(stderr=True))
    if report.has_skips:
        click.echo(f"Completed with {len(report.skipped)} skipped unit(s).", err=True)
    ctx.exit(report.exit_code)


def _fail(ctx: click.Context, error: Exception) -> None:
    logger.error(f"{ctx.info_name} failed: {error}")
    click.echo(f"Error: {error}", err=True)
    ctx.exit(EXIT_FATAL)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--config", type=click.Path(path_type=Path), help="Path to config file")
@click.pass_context
def cli(ctx, debug, config):
    """httpconv - convert between .http request files and Postman collections."""
    if config is None and DEFAULT_CONFIG_PATH.exists():
        config = DEFAULT_CONFIG_PATH

    cfg = {}
    try:
        if config is not None and not config.is_file():
            raise ConfigurationError("Configuration file not found", str(config))
        if config is not None:
            cfg = load_config(config)
        log_cfg = config_section(cfg, "logging")
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_FATAL)

    log_level = "DEBUG" if debug else str(log_cfg.get("level", DEFAULT_LOG_LEVEL))
    setup_logging(level=log_level, log_file=log_cfg.get("file"))

    ctx.ensure_object(dict)
    ctx.obj = cfg


@cli.command("export")
@click.argument("directory", type=click.Path(path_type=Path))
@click.pass_context
def export_cmd(ctx, directory):
    """Export HTTP requests in DIRECTORY to a Postman collection."""
    try:
        export_config = build_section_config(ExportConfig, ctx.obj or {}, "export")
    except ConfigurationError as e:
        _fail(ctx, e)

    collection_name = click.prompt("Enter the name for the Postman collection", default="", show_default=False).strip()

    report = ConversionReport(operation="export")
    exporter = DirectoryExporter(config=export_config, report=report)
    try:
        output_path = exporter.export(directory, collection_name)
    except ConversionError as e:
        _fail(ctx, e)

    click.echo(f"Collection saved to: {output_path}")
    _finish(ctx, report)


@cli.command("import")
@click.argument("file", type=click.Path(path_type=Path))
@click.pass_context
def import_cmd(ctx, file):
    """Import a Postman collection FILE into HTTP request files."""
    try:
        import_config = build_section_config(ImportConfig, ctx.obj or {}, "import")
    except ConfigurationError as e:
        _fail(ctx, e)

    report = ConversionReport(operation="import")
    importer = CollectionImporter(config=import_config, report=report)
    try:
        base_dir = importer.import_file(file)
    except ConversionError as e:
        _fail(ctx, e)

    click.echo(f"Request files written to: {base_dir}")
    _finish(ctx, report)


def main():
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
