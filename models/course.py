"""Datenmodell für Mata Kuliah und ihre Kelas (Pydantic v2).

Die Katalogdaten kommen von außen und werden hier nur gelesen.
Zusätzliche Katalogfelder (Jadwal, Dosen, ...) bleiben erhalten,
werden aber nicht ausgewertet.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Kelas(BaseModel):
    """Ein angebotener Kelas (Abschnitt/Zeitslot) einer Mata Kuliah."""

    model_config = ConfigDict(frozen=True, extra="allow")

    kelas: str          # Bezeichnung, z.B. "A", "B", "Internasional"


class MataKuliah(BaseModel):
    """Eine Mata Kuliah aus dem Katalog."""

    model_config = ConfigDict(frozen=True, extra="allow")

    kode: str                       # eindeutig, z.B. "IF101"
    nama: str                       # Anzeigename
    sks: int = Field(gt=0)          # Credit-Gewicht
    kelas: list[Kelas] = []
    jurusan: Optional[str] = None   # Studiengang (nur für Katalog-Filter)

    @field_validator("kode")
    @classmethod
    def strip_kode(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("kode darf nicht leer sein")
        return v

    @property
    def kelas_names(self) -> list[str]:
        """Namen aller angebotenen Kelas in Katalog-Reihenfolge."""
        return [k.kelas for k in self.kelas]

    def with_color(self, color_tag: str) -> "MataKuliahWithColor":
        """Erzeugt die gewählte Variante mit Farb-Tag."""
        data = self.model_dump(exclude={"color_tag"})
        return MataKuliahWithColor(**data, color_tag=color_tag)


class MataKuliahWithColor(MataKuliah):
    """Eine gewählte Mata Kuliah mit eindeutigem Farb-Tag."""

    color_tag: str
