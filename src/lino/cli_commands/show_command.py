"""Commands that display findings."""

from pathlib import Path

import typer
from rich.markup import escape

from .deps import cli_module
from .shared import app, console, read_findings

FINDINGS_ARG = typer.Argument(..., help="JSON file produced by the scanner")


def _build_provider(
    findings_file: Path,
    layout: str | None,
    group: str | None,
    root: Path | None,
):
    cli = cli_module()
    try:
        provider = cli.SearchResultProvider(
            workspace_root=str(root) if root else cli.get_workspace_root(),
            layout=layout or cli.get_layout(),
            grouping=group or cli.get_grouping(),
        )
    except ValueError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
    provider.set_results(read_findings(findings_file))
    cli.debug_print("provider", "Results installed", console=console, State=provider.snapshot())
    return provider


@app.command()
def show(
    findings_file: Path = FINDINGS_ARG,
    layout: str | None = typer.Option(
        None, "--layout", "-l", help="Layout: flat (list) or hierarchical (tree)"
    ),
    group: str | None = typer.Option(
        None, "--group", "-g", help="Grouping: none (default) or byRule (rule)"
    ),
    root: Path | None = typer.Option(
        None, "--root", help="Workspace root used for relative folder names"
    ),
    collapse: bool = typer.Option(
        False, "--collapse", help="Hide the findings under each file"
    ),
    debug: bool = typer.Option(False, "--debug", help="Print debug information"),
) -> None:
    """Show findings as a tree."""
    cli = cli_module()
    debug = debug or cli.get_debug()
    cli.set_debug_enabled(debug)
    cli.configure_logging(debug)

    provider = _build_provider(findings_file, layout, group, root)
    if provider.get_result_count() == 0:
        console.print("[green]No issues found.[/green]")
        return
    console.print(cli.build_rich_tree(provider, expand_all=not collapse))


@app.command()
def count(findings_file: Path = FINDINGS_ARG) -> None:
    """Print the number of findings."""
    provider = cli_module().SearchResultProvider()
    provider.set_results(read_findings(findings_file))
    console.print(provider.get_result_count())


@app.command()
def folders(
    findings_file: Path = FINDINGS_ARG,
    root: Path | None = typer.Option(
        None, "--root", help="Workspace root used for relative folder names"
    ),
) -> None:
    """List every folder that contains findings, with its issue count."""
    provider = _build_provider(findings_file, "hierarchical", "none", root)
    items = provider.get_all_folder_items()
    if not items:
        console.print("[dim]No folders.[/dim]")
        return
    for item in items:
        console.print(f"{escape(item.label)}  [dim]{item.description}[/dim]")
