"""Zustands-Stores des Planers: Auswahl, Pläne, Farben."""

from .observable import ObservableStore
from .colors import ColorAllocator
from .selection import SelectionStore
from .plans import PlanStore

__all__ = [
    "ObservableStore",
    "ColorAllocator",
    "SelectionStore",
    "PlanStore",
]
