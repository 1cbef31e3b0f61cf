"""
observer.py - Change notification for the Connect Four board

Observers receive the board itself on every accepted move and read back
whatever state they need through its accessors.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List

from connectfour.debug import debug


class Observer(ABC):
    """Something that receives board-change events."""

    @abstractmethod
    def update(self, board: Any) -> None:
        """Called after every accepted move with the board that changed."""


class CallbackObserver(Observer):
    """Adapts a plain function into an Observer."""

    def __init__(self, callback: Callable[[Any], None]):
        self.callback = callback

    def update(self, board: Any) -> None:
        self.callback(board)

    def __repr__(self) -> str:
        name = getattr(self.callback, "__name__", repr(self.callback))
        return f"CallbackObserver({name})"


class ObserverRegistry:
    """
    Registered observers in registration order.

    Registering the same observer twice is allowed and yields two
    notifications per event.
    """

    def __init__(self):
        self._observers: List[Observer] = []

    def add(self, observer: Observer) -> None:
        if not callable(getattr(observer, "update", None)):
            raise TypeError(f"{observer!r} has no update(board) method")
        self._observers.append(observer)
        debug.debug(f"Registered observer {observer!r} ({len(self._observers)} total)", "observer")

    def notify(self, board: Any) -> None:
        """
        Synchronously call update(board) on every observer.

        An observer that raises does not stop the others from being notified;
        the first exception is re-raised once every observer has been called.
        """
        # Snapshot so an observer registering another one mid-notification
        # only affects later events
        first_error = None
        for observer in list(self._observers):
            debug.trace(f"Notifying {observer!r}", "observer")
            try:
                observer.update(board)
            except Exception as e:
                debug.error(f"Observer {observer!r} failed: {e!r}", "observer")
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error

    def __len__(self) -> int:
        return len(self._observers)

