"""Environment variable and configuration file loading."""

from pathlib import Path
from typing import Any

import yaml

PROJECT_MARKER = ".lino"


def global_config_path() -> Path:
    """Return the path of the global ~/.lino/config.yml file."""
    return Path.home() / PROJECT_MARKER / "config.yml"


def is_global_config_dir(path: Path) -> bool:
    """Return True if the path is the global ~/.lino config directory."""
    home_config = Path.home() / PROJECT_MARKER
    try:
        return path.resolve() == home_config.resolve()
    except FileNotFoundError:
        return path == home_config


def load_env_file(env_path: Path) -> dict[str, str]:
    """Parse KEY=VALUE lines from a .env file (``export`` prefix and quotes allowed)."""
    if not env_path.is_file():
        return {}
    values: dict[str, str] = {}
    for raw in env_path.read_text().splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.removeprefix("export ").partition("=")
        if sep:
            values[key.strip()] = value.strip().strip("\"'")
    return values


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.lino/config.yml."""
    config_path = global_config_path()
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        return data if isinstance(data, dict) else {}
    return {}


def find_project_dir(start: Path | None = None) -> Path | None:
    """Walk upward from ``start`` looking for a project ``.lino`` directory."""
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        marker = candidate / PROJECT_MARKER
        if marker.is_dir() and not is_global_config_dir(marker):
            return candidate
    return None


def load_project_config(project_dir: Path | None = None) -> dict[str, str]:
    """Load project-specific configuration from .lino/.env."""
    if project_dir is None:
        project_dir = find_project_dir()
    if project_dir:
        return load_env_file(project_dir / PROJECT_MARKER / ".env")
    return {}
