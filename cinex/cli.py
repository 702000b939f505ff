"""
cinex.cli - Typer CLI entry point.

Batch tools around the EXPORT codec: inspect, validate, convert to and
from JSON, reformat, create new records and render summary reports.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cinex import __version__
from cinex.codec.actions import variant_for_kind
from cinex.codec.decoder import DecodeResult, decode_document
from cinex.codec.encoder import encode_all
from cinex.config import (
    CONFIG_FILENAME,
    CinexConfig,
    create_default_config,
    load_config,
    write_config,
)
from cinex.defaults import create_default_cinema
from cinex.exceptions import ConfigError, DecodeError, InterchangeError
from cinex.io import read_json, read_text, write_json, write_text
from cinex.logging import configure_logging
from cinex.models import Cinema, cinemas_from_dict, cinemas_to_dict
from cinex.utils import export_filename, format_duration, guid_factory

app = typer.Typer(
    name="cinex",
    help="Cutscene EXPORT format toolkit.\n\n"
    "Decodes, validates, converts and re-encodes the fixed-schema cinema "
    "text files consumed by the game engine.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"cinex {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Cinex - cutscene EXPORT format toolkit."""
    configure_logging(verbose)


def _load_config() -> CinexConfig:
    try:
        return load_config()
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _decode_file(path: Path, config: CinexConfig) -> DecodeResult:
    if not path.is_file():
        console.print(f"[red]Error: File not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        text = read_text(path, encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error reading {path}: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    return decode_document(text)


def _print_diagnostics(result: DecodeResult) -> None:
    for diagnostic in result.diagnostics:
        console.print(f"[yellow]⚠[/yellow] {escape(str(diagnostic))}")


def _require_records(result: DecodeResult, path: Path, strict: bool = False) -> None:
    try:
        result.raise_for_status(strict=strict)
    except DecodeError as e:
        _print_diagnostics(result)
        console.print(f"[red]Error: {path.name}: {escape(e.message)}[/red]")
        raise typer.Exit(1)


def _write_export(cinemas: list[Cinema], path: Path, config: CinexConfig) -> None:
    content = encode_all(cinemas, separator=config.record_separator)
    write_text(path, content, encoding=config.encoding, newline=config.newline)


def _default_output_dir(source: Path, config: CinexConfig) -> Path:
    return config.export_dir if config.export_dir else source.parent


@app.command("init")
def init_config(
    path: str = typer.Option(".", "--dir", "-d", help="Directory to write cinex.yaml in"),
) -> None:
    """Write a default cinex.yaml configuration file."""
    config_path = Path(path) / CONFIG_FILENAME
    if config_path.exists():
        console.print(f"[red]Error: {config_path} already exists[/red]")
        raise typer.Exit(1)

    write_config(create_default_config(), config_path)
    console.print(f"[green]✓[/green] Created {config_path}")


@app.command("new")
def new_cinema(
    name: str = typer.Argument(..., help="Display name of the new cinema"),
    path: str = typer.Option(".", "--dir", "-d", help="Directory to create the file in"),
) -> None:
    """Create a new cinema EXPORT file with one shot and one sync point."""
    config = _load_config()
    cinema = create_default_cinema(guid_factory(), name=name)
    output_path = Path(path) / export_filename([cinema])

    if output_path.exists():
        console.print(f"[red]Error: {output_path} already exists[/red]")
        raise typer.Exit(1)

    _write_export([cinema], output_path, config)
    console.print(f"[green]✓[/green] Created cinema '{escape(name)}' ({cinema.guid})")
    console.print(f"[dim]  {output_path}[/dim]")


@app.command("inspect")
def inspect_file(
    file: Path = typer.Argument(..., help="EXPORT file to inspect"),
    actions: bool = typer.Option(False, "--actions", "-a", help="List every action"),
) -> None:
    """Show the records contained in an EXPORT file."""
    config = _load_config()
    result = _decode_file(file, config)
    _require_records(result, file)

    table = Table(title=file.name)
    table.add_column("#", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("GUID")
    table.add_column("Duration", style="green")
    table.add_column("Shots", justify="right")
    table.add_column("Sync", justify="right")
    table.add_column("Actions", justify="right")
    table.add_column("Participants", justify="right")
    table.add_column("Paths", justify="right")
    table.add_column("Keyframes", justify="right")

    for i, cinema in enumerate(result.records):
        table.add_row(
            str(i),
            escape(cinema.obj_name),
            cinema.guid,
            format_duration(cinema.duration),
            str(len(cinema.shots)),
            str(len(cinema.sync_points)),
            str(len(cinema.actions)),
            str(len(cinema.participants)),
            str(len(cinema.camera_paths)),
            str(sum(len(p.keyframes) for p in cinema.camera_paths)),
        )
    console.print(table)

    if actions:
        for cinema in result.records:
            action_table = Table(title=f"Actions - {escape(cinema.obj_name)}")
            action_table.add_column("#", style="dim")
            action_table.add_column("Name", style="cyan")
            action_table.add_column("Type", style="magenta")
            action_table.add_column("Shot", justify="right")
            action_table.add_column("Sync", justify="right")
            action_table.add_column("Offset", justify="right")
            action_table.add_column("Duration", justify="right")
            for i, action in enumerate(cinema.actions):
                variant = variant_for_kind(action.kind)
                action_table.add_row(
                    str(i),
                    escape(action.name),
                    f"{variant.label} ({variant.code})",
                    str(action.shot),
                    str(action.sync_point),
                    f"{action.offset:.2f}",
                    f"{action.duration:.2f}",
                )
            console.print(action_table)

    _print_diagnostics(result)


@app.command("validate")
def validate_file(
    file: Path = typer.Argument(..., help="EXPORT file to validate"),
    strict: bool = typer.Option(
        False, "--strict", "-s", help="Fail on warnings (overrides config when set)"
    ),
) -> None:
    """Check that an EXPORT file decodes cleanly."""
    config = _load_config()
    result = _decode_file(file, config)
    _require_records(result, file, strict=strict or config.strict)

    _print_diagnostics(result)
    console.print(
        f"[green]✓[/green] {file.name}: {len(result.records)} record(s), "
        f"{len(result.warnings)} warning(s)"
    )


@app.command("convert")
def convert_file(
    file: Path = typer.Argument(..., help="EXPORT file, or .json interchange file"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output file path"),
) -> None:
    """Convert EXPORT to JSON, or JSON back to EXPORT (chosen by file suffix)."""
    config = _load_config()

    if file.suffix.lower() == ".json":
        try:
            cinemas = cinemas_from_dict(read_json(file))
        except FileNotFoundError:
            console.print(f"[red]Error: File not found: {file}[/red]")
            raise typer.Exit(1)
        except (json.JSONDecodeError, InterchangeError) as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(1)

        output_path = (
            Path(output) if output else _default_output_dir(file, config) / export_filename(cinemas)
        )
        _write_export(cinemas, output_path, config)
    else:
        result = _decode_file(file, config)
        _require_records(result, file, strict=config.strict)
        _print_diagnostics(result)

        output_path = Path(output) if output else file.with_suffix(".json")
        write_json(output_path, cinemas_to_dict(result.records), indent=config.json_indent)
        cinemas = result.records

    console.print(f"[green]✓[/green] Converted {len(cinemas)} record(s) to {output_path}")


@app.command("format")
def format_file(
    file: Path = typer.Argument(..., help="EXPORT file to rewrite"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output file path (default: rewrite in place)"
    ),
) -> None:
    """Rewrite an EXPORT file in canonical layout, reindexing every section."""
    config = _load_config()
    result = _decode_file(file, config)
    _require_records(result, file, strict=config.strict)
    _print_diagnostics(result)

    output_path = Path(output) if output else file
    _write_export(result.records, output_path, config)
    console.print(f"[green]✓[/green] Wrote {len(result.records)} record(s) to {output_path}")


@app.command("report")
def report_file(
    file: Path = typer.Argument(..., help="EXPORT file to summarize"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output HTML path"),
    open_browser: bool = typer.Option(False, "--open", help="Open report in browser"),
) -> None:
    """Generate an HTML summary report of an EXPORT file."""
    from cinex.reports.summary import generate_summary

    config = _load_config()
    result = _decode_file(file, config)
    _require_records(result, file)

    output_path = Path(output) if output else file.with_name(f"{file.stem}.summary.html")
    path = generate_summary(
        result.records,
        source_name=file.name,
        output_path=output_path,
        diagnostics=result.diagnostics,
        open_browser=open_browser,
    )
    console.print(f"[green]✓[/green] Report written to {path}")


if __name__ == "__main__":
    app()
