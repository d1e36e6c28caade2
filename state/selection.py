"""SelectionStore – die gewählten Mata Kuliah mit SKS- und Anzahl-Limit.

Neueste Wahl steht vorne. Jede gewählte Mata Kuliah trägt einen Farb-Tag
aus dem ColorAllocator; Farben werden beim Abwählen zurückgegeben.
"""

import logging
from typing import Optional, Union

from config.schema import LimitConfig
from models.course import MataKuliah, MataKuliahWithColor
from state.colors import ColorAllocator
from state.observable import ObservableStore

logger = logging.getLogger(__name__)

CourseRef = Union[MataKuliah, MataKuliahWithColor, str]


def _kode_of(matkul: CourseRef) -> str:
    return matkul if isinstance(matkul, str) else matkul.kode


class SelectionStore:
    """Verwaltet die Auswahl und hält alle Limits bei jedem Schreibzugriff ein."""

    def __init__(self, limits: LimitConfig, colors: ColorAllocator) -> None:
        self.limits = limits
        self.colors = colors
        self.store: ObservableStore[tuple[MataKuliahWithColor, ...]] = ObservableStore(())

    # ─── Lesen ───

    @property
    def chosen(self) -> tuple[MataKuliahWithColor, ...]:
        """Snapshot der Auswahl, neueste zuerst."""
        return self.store.get()

    @property
    def count(self) -> int:
        return len(self.chosen)

    @property
    def total_sks(self) -> int:
        return sum(mk.sks for mk in self.chosen)

    def get(self, kode: str) -> Optional[MataKuliahWithColor]:
        for mk in self.chosen:
            if mk.kode == kode:
                return mk
        return None

    def has(self, matkul: CourseRef) -> bool:
        """True wenn eine Mata Kuliah mit diesem kode gewählt ist."""
        return self.get(_kode_of(matkul)) is not None

    def can_add(self, matkul: MataKuliah) -> bool:
        """Prüft die Limits, ohne etwas zu verändern."""
        chosen = self.chosen
        return (
            not self.has(matkul)
            and len(chosen) < self.limits.matkul_limit
            and sum(mk.sks for mk in chosen) + matkul.sks <= self.limits.sks_limit
            and len(self.colors) > 0
        )

    # ─── Schreiben ───

    def add(self, matkul: MataKuliah) -> bool:
        """Wählt eine Mata Kuliah. False wenn ein Limit verletzt würde."""
        if not self.can_add(matkul):
            logger.info(
                f"Mata Kuliah {matkul.kode} abgelehnt "
                f"({self.count}/{self.limits.matkul_limit} MK, "
                f"{self.total_sks}+{matkul.sks}/{self.limits.sks_limit} SKS)"
            )
            return False

        color = self.colors.acquire()
        if color is None:
            return False

        tagged = matkul.with_color(color)
        self.store.update(lambda chosen: (tagged,) + chosen)
        logger.debug(f"Mata Kuliah {matkul.kode} gewählt, Farbe {color}")
        return True

    def remove(self, matkul: CourseRef) -> bool:
        """Wählt eine Mata Kuliah ab. Immer True, auch wenn sie nicht gewählt war."""
        kode = _kode_of(matkul)
        removed = self.get(kode)
        if removed is None:
            return True

        self.colors.release(removed.color_tag)
        self.store.update(
            lambda chosen: tuple(mk for mk in chosen if mk.kode != kode)
        )
        logger.debug(f"Mata Kuliah {kode} abgewählt, Farbe {removed.color_tag} frei")
        return True

    def toggle(self, matkul: Union[MataKuliah, MataKuliahWithColor]) -> bool:
        """Abwählen wenn gewählt, sonst wählen. Gibt das Ergebnis zurück."""
        if self.has(matkul):
            return self.remove(matkul)
        return self.add(matkul)

    def reset(self) -> None:
        """Leert die Auswahl und gibt alle Farben frei."""
        self.store.set(())
        self.colors.reset()

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return (f"SelectionStore({self.count} MK, {self.total_sks} SKS)")
