"""Observer registry used by the stores to publish state changes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChangeNotifier(Generic[T]):
    """Keeps a list of callbacks and calls each one with a new value.

    Observers only receive values; the owning store stays the sole mutator
    of its data.
    """

    def __init__(self) -> None:
        self._callbacks: list[Callable[[T], None]] = []

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register *callback* and return a function that unregisters it."""
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def notify(self, value: T) -> None:
        """Call every observer with *value*.

        A failing observer is logged and does not stop the others.
        """
        for callback in list(self._callbacks):
            try:
                callback(value)
            except Exception:
                logger.exception("Change observer %r failed", callback)

    def __len__(self) -> int:
        return len(self._callbacks)
