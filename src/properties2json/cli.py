"""CLI entry point for properties2json."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from properties2json.config import Properties2JsonConfig, load_config
from properties2json.config.loader import DEFAULT_CONFIG_TEMPLATE
from properties2json.converter import FileClassifierConverter
from properties2json.logging_setup import configure_logging
from properties2json.output import JsonWriter
from properties2json.walker import TreeConverter, TreeReport

app = typer.Typer(
    name="properties2json",
    help="Convert Java .properties files under a directory tree to JSON.",
)

config_app = typer.Typer(help="Manage properties2json configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: Properties2JsonConfig | None = None


def _get_config() -> Properties2JsonConfig:
    if _config is None:
        return load_config()
    return _config


def _fail(message: str) -> None:
    rprint(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to properties2json.yaml")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log at debug level")
    ] = False,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        _fail(str(e))
    configure_logging("debug" if verbose else _config.log_level, _config.log_format)


def _display_report(report: TreeReport, dry_run: bool) -> None:
    """Summarize a tree conversion as a Rich table plus any failures."""
    title = "Conversion (dry run)" if dry_run else "Conversion"
    table = Table(title=title)
    table.add_column("Source", style="cyan")
    table.add_column("Output", style="green")
    table.add_column("Keys", justify="right")
    for result in report.converted:
        table.add_row(
            escape(result.source_path),
            escape(result.dest_path),
            str(result.property_count),
        )
    rprint(table)

    for err in report.failed:
        rprint(f"[red]Failed:[/red] {escape(str(err))}")

    rprint(
        f"\n[bold]{len(report.converted)}[/bold] converted, "
        f"{len(report.skipped)} skipped, "
        f"[{'red' if report.failed else 'dim'}]{len(report.failed)} failed[/]"
    )


@app.command()
def convert(
    source: Annotated[
        str | None, typer.Argument(help="Directory to scan (default: config source_dir)")
    ] = None,
    dest: Annotated[
        str | None, typer.Option("--dest", "-d", help="Mirror output under this directory")
    ] = None,
    exclude: Annotated[
        str | None, typer.Option("--exclude", "-e", help="Regex of file names to skip")
    ] = None,
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview without writing"),
) -> None:
    """Convert every .properties file under SOURCE to JSON."""
    cfg = _get_config()
    source_dir = Path(source if source is not None else cfg.source_dir)
    dest_dir = dest if dest is not None else cfg.dest_dir
    pattern = exclude if exclude is not None else cfg.exclude

    try:
        classifier = FileClassifierConverter(source_dir, dest_dir, pattern)
    except re.error as e:
        _fail(f"invalid exclude pattern {pattern!r}: {e}")

    walker = TreeConverter(classifier, JsonWriter(cfg.output), cfg.ignore_dirs)
    try:
        report = walker.run(source_dir, dry_run=dry_run)
    except FileNotFoundError as e:
        _fail(str(e))

    _display_report(report, dry_run)
    if report.has_failures:
        raise typer.Exit(1)


@app.command()
def show(
    file: str = typer.Argument(..., help="Path to a .properties file"),
    exclude: str | None = typer.Option(None, "--exclude", "-e", help="Regex of file names to skip"),
) -> None:
    """Print the JSON a single file would convert to."""
    cfg = _get_config()
    pattern = exclude if exclude is not None else cfg.exclude
    path = Path(file)

    try:
        classifier = FileClassifierConverter(path.parent, None, pattern)
        result = classifier.convert(path)
    except re.error as e:
        _fail(f"invalid exclude pattern {pattern!r}: {e}")
    except (OSError, ValueError) as e:
        _fail(str(e))

    if result is None:
        rprint(f"[yellow]Skipped:[/yellow] {escape(file)} is not treated as a properties file")
        return

    typer.echo(result.json_text)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default properties2json.yaml in current directory."""
    target = Path("properties2json.yaml")
    if target.exists() and not force:
        rprint("[yellow]properties2json.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
