"""
Configuration management for lino.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Project .env file (.lino/.env)
3. Global config file (~/.lino/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    PROJECT_MARKER,
    find_project_dir,
    global_config_path,
    is_global_config_dir,
    load_env_file,
    load_global_config,
    load_project_config,
)
from .getters import (
    get_config,
    get_debug,
    get_grouping,
    get_layout,
    get_workspace_root,
)

__all__ = [
    # env_loader
    "PROJECT_MARKER",
    "find_project_dir",
    "global_config_path",
    "is_global_config_dir",
    "load_env_file",
    "load_global_config",
    "load_project_config",
    # getters
    "get_config",
    "get_debug",
    "get_grouping",
    "get_layout",
    "get_workspace_root",
]
