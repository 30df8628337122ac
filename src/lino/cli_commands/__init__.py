"""CLI command modules; importing this package registers every command on ``app``."""

from . import config_command, show_command
from .shared import app, console

__all__ = ["app", "config_command", "console", "show_command"]
