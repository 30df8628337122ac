"""Synchronous change broadcast for view state."""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class EventEmitter:
    """Hold a list of listeners and call them in subscription order."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""
        self._listeners.append(listener)

        def dispose() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return dispose

    __call__ = subscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def fire(self, *args: Any) -> None:
        """Notify every listener; a failing listener does not stop the rest."""
        for listener in list(self._listeners):
            try:
                listener(*args)
            except Exception:
                logger.warning("Change listener %r failed", listener, exc_info=True)
