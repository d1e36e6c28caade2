"""ObservableStore – ein Wert mit get/set/update und Änderungs-Benachrichtigung.

Alle Stores des Planers liegen in solchen Containern. Gespeichert werden
nur unveränderliche Snapshots (Tupel, frozen Modelle); ein Leser kann
einen Zwischenzustand deshalb nie sehen.
"""

import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class ObservableStore(Generic[T]):
    """Beobachtbarer Wert-Container."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: list[Listener] = []

    def get(self) -> T:
        """Aktueller Snapshot."""
        return self._value

    def set(self, value: T) -> None:
        """Ersetzt den Wert vollständig und benachrichtigt alle Listener."""
        self._value = value
        self._notify()

    def update(self, fn: Callable[[T], T]) -> T:
        """Ersetzt den Wert durch fn(aktueller Wert). Gibt den neuen Wert zurück."""
        self._value = fn(self._value)
        self._notify()
        return self._value

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registriert einen Listener; Rückgabe meldet ihn wieder ab.

        Der Listener wird sofort einmal mit dem aktuellen Wert aufgerufen.
        """
        self._listeners.append(listener)
        self._call(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            self._call(listener)

    def _call(self, listener: Listener) -> None:
        try:
            listener(self._value)
        except Exception:
            logger.exception(f"Listener {listener!r} fehlgeschlagen")

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def __repr__(self) -> str:
        return f"ObservableStore({self._value!r}, {len(self._listeners)} listeners)"
