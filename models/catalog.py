"""Catalog: Mata-Kuliah-Katalog als JSON laden und filtern."""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from models.course import MataKuliah


class Catalog(BaseModel):
    """Read-only Sammlung aller angebotenen Mata Kuliah."""

    courses: list[MataKuliah]

    def get(self, kode: str) -> Optional[MataKuliah]:
        """Sucht eine Mata Kuliah per kode. None wenn unbekannt."""
        for mk in self.courses:
            if mk.kode == kode:
                return mk
        return None

    def filter_jurusan(self, jurusan: list[str]) -> list[MataKuliah]:
        """Mata Kuliah der gegebenen Studiengänge.

        Leere Filterliste = kein Filter. Mata Kuliah ohne jurusan
        passen immer (z.B. allgemeine Pflichtfächer).
        """
        if not jurusan:
            return list(self.courses)
        wanted = set(jurusan)
        return [mk for mk in self.courses
                if mk.jurusan is None or mk.jurusan in wanted]

    def summary(self) -> str:
        total_sks = sum(mk.sks for mk in self.courses)
        total_kelas = sum(len(mk.kelas) for mk in self.courses)
        return (f"Mata Kuliah: {len(self.courses)} | "
                f"SKS gesamt: {total_sks} | Kelas: {total_kelas}")

    def __len__(self) -> int:
        return len(self.courses)

    @classmethod
    def load_json(cls, path: Path) -> "Catalog":
        """Lädt einen Katalog aus JSON.

        Akzeptiert sowohl eine Liste von Mata Kuliah als auch
        ein Objekt mit Schlüssel "courses".
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Katalog-Datei nicht gefunden: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, list):
            data = {"courses": data}
        return cls.model_validate(data)
