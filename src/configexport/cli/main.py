"""
Typer-based CLI for configexport.

Commands:
- export: Write the seeds and their dependency closure to a directory
- closure: Print the dependency-first closure without writing anything

Usage Patterns:
    configexport export field.field.node.page.body --source config/sync --path ../config/partial/feature-312
    configexport export core.entity_view_display.node.page.default --source config/sync --module custom_pages --unset-instance-id
    configexport closure field.field.node.page.body --source config/sync
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from configexport.core.errors import ExportError, InvalidSelectionError
from configexport.core.exporter import export_config
from configexport.core.redaction import RedactionPolicy
from configexport.core.utils.config import get_config, load_config
from configexport.core.utils.logger import log_error, setup_logging
from configexport.io.file_storage import FileStorageWriter, RecordingWriter

from .exit_codes import CliExit
from .selection import check_seeds, open_source, resolve_destination

app = typer.Typer(
    name="configexport",
    help="Export configuration objects together with everything they depend on.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


@app.callback()
def main(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file (JSON)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """Export configuration objects together with everything they depend on."""
    if config_file is not None:
        try:
            config = load_config(str(config_file))
        except ValueError as e:
            raise CliExit.config_error(f"Failed to load configuration: {e}")
    else:
        config = get_config()

    if log_level is not None:
        config.logging.level = log_level
        config.logging.validate()
    setup_logging(level=config.logging.level, log_file=config.logging.log_file)


def _show_written(written: List[str]) -> None:
    table = Table(title="Exported configuration")
    table.add_column("#", style="magenta", justify="right")
    table.add_column("Name", style="cyan")
    for index, name in enumerate(written, start=1):
        table.add_row(str(index), name)
    console.print(table)


@app.command("export")
def export_command(
    seeds: Optional[List[str]] = typer.Argument(
        None, help="Configuration names to export along with their dependencies"
    ),
    source: Optional[Path] = typer.Option(
        None, "--source", "-s", help="Directory of source configuration (.yml) files"
    ),
    path: Optional[Path] = typer.Option(
        None, "--path", help="Custom path to export configuration (cannot be mixed with --module)"
    ),
    module: Optional[str] = typer.Option(
        None, "--module", help="Module name to export configuration to (cannot be mixed with --path)"
    ),
    unset_instance_id: Optional[bool] = typer.Option(
        None,
        "--unset-instance-id/--keep-instance-id",
        help="Export configuration without the instance id key",
    ),
    unset_integrity_hash: Optional[bool] = typer.Option(
        None,
        "--unset-integrity-hash/--keep-integrity-hash",
        help="Export configuration without the integrity hash key",
    ),
) -> None:
    """Export configuration and its dependencies to a directory."""
    config = get_config()
    try:
        repository = open_source(source, config)
        seed_names = check_seeds(seeds or [], repository)
        destination = resolve_destination(path, module, config)
    except InvalidSelectionError as e:
        log_error("CLI", e.message)
        raise CliExit.config_error(e.message)

    policy = RedactionPolicy.from_config(
        config,
        strip_instance_id=unset_instance_id,
        strip_integrity_hash=unset_integrity_hash,
    )
    writer = FileStorageWriter(destination)
    try:
        writer.prepare()
        written = export_config(repository, seed_names, writer, policy)
    except ExportError as e:
        log_error("EXPORT", e.message, exception=e)
        raise CliExit.error(f"Export failed: {e.message}")

    _show_written(written)
    console.print(
        f"[green]Successfully exported {len(written)} configuration objects to {destination}.[/green]",
        soft_wrap=True,
    )


@app.command("closure")
def closure_command(
    seeds: Optional[List[str]] = typer.Argument(
        None, help="Configuration names to resolve"
    ),
    source: Optional[Path] = typer.Option(
        None, "--source", "-s", help="Directory of source configuration (.yml) files"
    ),
) -> None:
    """Print the dependency closure in write order without exporting."""
    config = get_config()
    try:
        repository = open_source(source, config)
        seed_names = check_seeds(seeds or [], repository)
    except InvalidSelectionError as e:
        log_error("CLI", e.message)
        raise CliExit.config_error(e.message)

    recorder = RecordingWriter()
    try:
        export_config(repository, seed_names, recorder)
    except ExportError as e:
        log_error("EXPORT", e.message, exception=e)
        raise CliExit.error(f"Closure failed: {e.message}")

    for name in recorder.names:
        typer.echo(name)


if __name__ == "__main__":
    app()
