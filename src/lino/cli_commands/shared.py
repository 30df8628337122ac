"""Shared CLI app objects and helpers."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from lino.modules.results import Finding, FindingsLoadError

from .deps import cli_module

app = typer.Typer(
    name="lino",
    help="Browse lint findings as a flat list or a folder tree",
    no_args_is_help=True,
)
console = Console()


def read_findings(findings_file: Path) -> list[Finding]:
    """Load findings for a command, exiting with status 1 on failure."""
    try:
        return cli_module().load_findings(findings_file)
    except FindingsLoadError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
