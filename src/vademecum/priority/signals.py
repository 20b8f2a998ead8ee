"""Named, payload-less change signals.

A signal is the in-process counterpart of a window event: listeners subscribe
by name, a sender emits, and every listener subscribed at emit time is called
synchronously.
"""

import logging
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class ChangeSignal:
    """A broadcast with no payload."""

    def __init__(self, name: str):
        self.name = name
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self) -> int:
        """Call every current listener.

        Returns:
            Number of listeners notified
        """
        # Snapshot so listeners can (un)subscribe while being notified
        listeners = list(self._listeners)
        for listener in listeners:
            listener()
        logger.debug(f"Signal {self.name!r} delivered to {len(listeners)} listeners")
        return len(listeners)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def __repr__(self) -> str:
        return f"ChangeSignal({self.name!r}, listeners={len(self._listeners)})"


# Process-wide registry
_signals: Dict[str, ChangeSignal] = {}


def get_signal(name: str) -> ChangeSignal:
    """Get the process-wide signal registered under a name."""
    if name not in _signals:
        _signals[name] = ChangeSignal(name)
    return _signals[name]
