"""CLI entry point: walk a directory tree and report project roots."""

import logging
from pathlib import Path

import typer

from . import __version__
from .format import format_project
from .scanner import ScanError, visit_dirs

app = typer.Typer(
    help="Find all projects in your deeply nested development directory.",
    add_completion=False,
)


def _fail(msg: str) -> None:
    """Print an error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    raise typer.Exit(code=1)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"projfind {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_project(profile) -> None:
    # click strips the styling when stdout is not a terminal
    typer.echo(format_project(profile, color=True))


@app.command()
def scan(
    directory: Path = typer.Argument(..., help="Sets the input directory to scan."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each visited directory to stderr"),
    version: bool = typer.Option(
        False, "--version", callback=_print_version, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Find all projects in your deeply nested development directory."""
    _setup_logging(verbose)
    try:
        visit_dirs(directory, _print_project)
    except ScanError as e:
        _fail(str(e))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
