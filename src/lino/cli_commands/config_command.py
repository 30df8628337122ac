"""Configuration CLI command."""

import typer
from rich.markup import escape

from .deps import cli_module
from .shared import app, console


@app.command()
def config(
    action: str = typer.Argument("show", help="Action: show, path"),
) -> None:
    """Show the effective view configuration."""
    cli = cli_module()

    if action == "path":
        console.print(escape(str(cli.global_config_path())))
        return

    if action == "show":
        project_dir = cli.find_project_dir()
        console.print("[bold]Effective configuration:[/bold]")
        console.print(f"  LINO_LAYOUT={cli.get_layout(project_dir).value}")
        console.print(f"  LINO_GROUPING={cli.get_grouping(project_dir).value}")
        console.print(f"  LINO_WORKSPACE_ROOT={escape(cli.get_workspace_root(project_dir))}")
        console.print(f"  LINO_DEBUG={str(cli.get_debug(project_dir)).lower()}")
        if project_dir:
            console.print(f"[dim]Project: {escape(str(project_dir))}[/dim]")
        return

    console.print(f"[red]Unknown action: {escape(action)}. Use 'show' or 'path'.[/red]")
    raise typer.Exit(1)
