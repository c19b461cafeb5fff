"""Minimal synchronous observer support for client-side stores."""

from collections.abc import Callable
from typing import Self


class Observable:
    """Base class for state holders that notify subscribers after each change.

    Callbacks run synchronously with the store as their only argument, so an
    observer always sees a fully applied mutation.
    """

    def __init__(self) -> None:
        self._observers: list[Callable[[Self], None]] = []

    def subscribe(self, callback: Callable[[Self], None]) -> Callable[[], None]:
        """Register a callback and return a function that removes it."""
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._observers):
            callback(self)
