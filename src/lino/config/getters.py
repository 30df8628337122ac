"""Configuration getter functions."""

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from lino.modules.results.models import Grouping, Layout, parse_grouping, parse_layout

from .env_loader import load_global_config, load_project_config

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


def get_config(key: str, project_dir: Path | None = None, default: Any = None) -> Any:
    """Resolve ``key`` from the environment, the project .env, then ~/.lino/config.yml.

    Sources are read lazily and the first non-empty value wins; ``default``
    is returned when none has it.
    """
    sources: tuple[Callable[[], Mapping[str, Any]], ...] = (
        lambda: os.environ,
        lambda: load_project_config(project_dir),
        load_global_config,
    )
    for source in sources:
        value = source().get(key)
        if value not in (None, ""):
            return value
    return default


def get_layout(project_dir: Path | None = None) -> Layout:
    """Get the configured layout (default: flat)."""
    value = get_config("LINO_LAYOUT", project_dir, default=Layout.FLAT.value)
    try:
        return parse_layout(str(value))
    except ValueError:
        logger.warning("Ignoring invalid LINO_LAYOUT %r", value)
        return Layout.FLAT


def get_grouping(project_dir: Path | None = None) -> Grouping:
    """Get the configured grouping (default: none)."""
    value = get_config("LINO_GROUPING", project_dir, default=Grouping.NONE.value)
    try:
        return parse_grouping(str(value))
    except ValueError:
        logger.warning("Ignoring invalid LINO_GROUPING %r", value)
        return Grouping.NONE


def get_workspace_root(project_dir: Path | None = None) -> str:
    """Get the workspace root used for relative display (default: cwd)."""
    value = get_config("LINO_WORKSPACE_ROOT", project_dir)
    if value:
        return str(value)
    try:
        return str(Path.cwd())
    except OSError:
        return ""


def get_debug(project_dir: Path | None = None) -> bool:
    """Return True when debug output is enabled."""
    value = get_config("LINO_DEBUG", project_dir, default=False)
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY
