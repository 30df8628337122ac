"""lino CLI - browse lint findings as a list or a folder tree."""

from lino.cli_commands import app, console
from lino.config import (
    find_project_dir,
    get_debug,
    get_grouping,
    get_layout,
    get_workspace_root,
    global_config_path,
)
from lino.console import build_rich_tree
from lino.modules.results import SearchResultProvider, load_findings
from lino.utils.debug import configure_logging, debug_print, set_debug_enabled

__all__ = [
    "SearchResultProvider",
    "app",
    "build_rich_tree",
    "configure_logging",
    "console",
    "debug_print",
    "find_project_dir",
    "get_debug",
    "get_grouping",
    "get_layout",
    "get_workspace_root",
    "global_config_path",
    "load_findings",
    "main",
    "set_debug_enabled",
]


@app.command()
def version() -> None:
    """Show the installed lino version."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        current_version = pkg_version("lino")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"lino {current_version}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
