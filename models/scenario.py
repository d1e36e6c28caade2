"""Scenario: eine Auswahl + Prioritäten als YAML-Datei (für CLI und Tests).

Format:

    catalog: katalog.json        # optional, relativ zur Szenario-Datei
    courses:                     # optional, Mata Kuliah direkt angegeben
      - {kode: IF101, nama: ALGORITMA, sks: 3, kelas: [{kelas: A}]}
    chosen: [IF101]              # optional; Default: alle unter courses
    plans:
      IF101: [A, null, B]        # null = ungesetzte Priorität
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel
from ruamel.yaml import YAML

from models.catalog import Catalog
from models.course import MataKuliah

if TYPE_CHECKING:
    from planner import RegistrationPlanner


class ScenarioError(ValueError):
    """Szenario-Datei ist unvollständig oder widersprüchlich."""


class Scenario(BaseModel):
    catalog: Optional[str] = None
    courses: list[MataKuliah] = []
    chosen: Optional[list[str]] = None
    plans: dict[str, list[Optional[str]]] = {}

    def resolve_courses(self, base_dir: Path = Path(".")) -> list[MataKuliah]:
        """Mata Kuliah in Wahl-Reihenfolge (Katalog + direkt angegebene)."""
        known: dict[str, MataKuliah] = {}
        if self.catalog:
            for mk in Catalog.load_json(base_dir / self.catalog).courses:
                known[mk.kode] = mk
        for mk in self.courses:
            known[mk.kode] = mk

        if self.chosen is None:
            return list(self.courses)

        missing = [k for k in self.chosen if k not in known]
        if missing:
            raise ScenarioError(f"Unbekannte Mata Kuliah im Szenario: {missing}")
        return [known[k] for k in self.chosen]

    def apply(self, planner: "RegistrationPlanner",
              base_dir: Path = Path(".")) -> list[MataKuliah]:
        """Überträgt das Szenario in die Stores. Gibt abgelehnte Mata Kuliah zurück."""
        rejected = [mk for mk in self.resolve_courses(base_dir)
                    if not planner.selection.add(mk)]
        for kode, plan in self.plans.items():
            planner.plans.replace(kode, plan)
        return rejected

    @classmethod
    def load_yaml(cls, path: Path) -> "Scenario":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Szenario-Datei nicht gefunden: {path}")
        with open(path, "r", encoding="utf-8") as f:
            raw = YAML(typ="safe").load(f)
        try:
            return cls.model_validate(raw or {})
        except Exception as e:
            raise ScenarioError(f"Szenario-Datei ungültig: {path}\n{e}") from e
