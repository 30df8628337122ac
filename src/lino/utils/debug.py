"""Debug utilities for results tree visibility.

Thread-local debug switch with rich formatting for console sessions.
"""

import logging
import threading
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.padding import Padding
from rich.pretty import Pretty
from rich.text import Text

_debug_state = threading.local()


def set_debug_enabled(enabled: bool) -> None:
    """Set debug mode for the current thread/session."""
    _debug_state.enabled = enabled


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled for the current thread/session."""
    return getattr(_debug_state, "enabled", False)


def configure_logging(debug: bool = False, console: Console | None = None) -> None:
    """Route ``lino`` loggers through rich; DEBUG level when ``debug`` is set."""
    logger = logging.getLogger("lino")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console or Console(stderr=True), show_path=False))


def _shorten(value: Any, limit: int = 100) -> str:
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(v) for v in value)
    text = str(value)
    if len(text) > limit:
        return f"{text[:limit]}... ({len(text)} chars)"
    return text


def debug_print(category: str, message: str, console: Console | None = None, **data: Any) -> None:
    """Print a categorised debug block when debug mode is on.

    Mappings are pretty-printed; other values are shown on one dim line,
    truncated to 100 characters. ``None`` values are skipped.
    """
    if not is_debug_enabled():
        return
    console = console or Console(stderr=True)
    header = Text(f"[DEBUG:{category}] ", style="bold cyan")
    header.append(message)
    console.print(header)
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            console.print(Text(f"  {key}:", style="dim"))
            console.print(Padding(Pretty(value), (0, 0, 0, 4)))
        else:
            console.print(Text(f"  {key}: {_shorten(value)}", style="dim"))
