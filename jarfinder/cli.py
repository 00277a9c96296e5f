"""Typer-based CLI: report which archives provide a class."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__, config
from .errors import InvalidPathKind
from .models import Match
from .session import JarFinder

console = Console()

DEFAULT_SEARCH_PATH = "./"

app = typer.Typer(
    help="Find which jar files contain a class.",
    add_completion=False,
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"JarFinder v{__version__}")
        raise typer.Exit()


def print_usage() -> None:
    typer.echo("Usage: jarfinder classname [ dir ] [ dir2 ] [ dir3 ] [ ... ]")
    try:
        pwd = str(Path(".").resolve())
    except OSError:
        pwd = DEFAULT_SEARCH_PATH
    typer.echo(f"If no directories are specified, the current directory '{pwd}' will be searched.")


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _print_matches(class_name: str, matches: List[Match]) -> None:
    typer.echo(f"Search results for '{class_name}':")
    for match in matches:
        typer.echo(f"{match.archive_path} contains the class '{match.class_name}' ({match.kind.value})")


def _print_table(class_name: str, matches: List[Match]) -> None:
    table = Table(title=f"Search results for '{class_name}'", show_lines=False)
    table.add_column("Archive", style="cyan", overflow="fold")
    table.add_column("Class", style="green", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    for match in matches:
        table.add_row(match.archive_path, match.class_name, match.kind.value)
    console.print(table)


@app.command()
def main(
    class_name: Optional[str] = typer.Argument(None, metavar="CLASSNAME", help="Class to look for, e.g. com.foo.Bar or Bar."),
    search_paths: Optional[List[str]] = typer.Argument(None, metavar="[DIR]...", help="Directories or jars to search (default: current directory)."),
    table: bool = typer.Option(False, "--table", help="Show results as a table."),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging."),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Read settings from this TOML file."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Search jar files under each DIR for CLASSNAME.

    A bare name (no package) is matched in every package of every jar.

    Example:
      jarfinder org.slf4j.Logger ~/.m2
      jarfinder Logger lib/ build/libs/app.jar
    """
    if class_name is None:
        print_usage()
        raise typer.Exit(code=-1)

    settings = config.load_config(config_file)
    _configure_logging("DEBUG" if verbose else settings.log_level)

    roots = list(search_paths or []) or [DEFAULT_SEARCH_PATH]
    finder = JarFinder(settings)

    found = False
    for session in finder.sessions(class_name, roots):
        try:
            count = session.match_count()
        except InvalidPathKind as exc:
            typer.echo(f"Error: {exc}", err=True)
            continue
        if count > 0:
            if table:
                _print_table(class_name, list(session.matches))
            else:
                _print_matches(class_name, list(session.matches))
            found = True

    if not found:
        typer.echo(f"Could not find class '{class_name}' in any jar in the given path(s)")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
