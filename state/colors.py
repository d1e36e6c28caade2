"""ColorAllocator – vergibt Farb-Tags aus einer festen Palette.

Der Pool verhält sich wie ein Stapel: zurückgegebene Farben werden als
nächstes wieder ausgegeben, sonst gilt die Paletten-Reihenfolge. So ist die
Vergabe innerhalb eines Laufs deterministisch, und Abwählen + erneutes
Wählen einer Mata Kuliah ergibt wieder dieselbe Farbe.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class ColorAllocator:
    """Verwaltet die freien Farben der Palette."""

    def __init__(self, palette: list[str]) -> None:
        if len(set(palette)) != len(palette):
            raise ValueError("Palette enthält doppelte Farben")
        self._palette: tuple[str, ...] = tuple(palette)
        # Index 0 = nächste auszugebende Farbe
        self._available: list[str] = list(self._palette)

    @property
    def palette(self) -> tuple[str, ...]:
        return self._palette

    @property
    def available(self) -> tuple[str, ...]:
        """Freie Farben, nächste Ausgabe zuerst."""
        return tuple(self._available)

    @property
    def in_use(self) -> set[str]:
        """Alle aktuell vergebenen Farben."""
        return set(self._palette) - set(self._available)

    def acquire(self) -> Optional[str]:
        """Entnimmt eine freie Farbe. None wenn keine mehr frei ist."""
        if not self._available:
            logger.warning("Keine Farbe mehr frei")
            return None
        return self._available.pop(0)

    def release(self, tag: str) -> None:
        """Gibt eine Farbe zurück in den Pool."""
        if tag not in self._palette:
            logger.warning(f"Farbe '{tag}' gehört nicht zur Palette – ignoriert")
            return
        if tag in self._available:
            logger.warning(f"Farbe '{tag}' ist bereits frei – ignoriert")
            return
        self._available.insert(0, tag)

    def reset(self) -> None:
        """Füllt den Pool wieder mit der kompletten Palette."""
        self._available = list(self._palette)

    def __len__(self) -> int:
        return len(self._available)

    def __repr__(self) -> str:
        return f"ColorAllocator({len(self._available)}/{len(self._palette)} frei)"
