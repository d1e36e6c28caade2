"""Konfigurationsmanager: Laden und Speichern der Planer-Konfiguration.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import json
from datetime import date
from pathlib import Path
from typing import Optional

from rich.console import Console
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from config.defaults import default_planner_config
from config.schema import PlannerConfig

console = Console()
yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


_YAML_HEADER = f"""\
# ============================================
# Rencana-PRS: Planer-Konfiguration
# Erstellt: {date.today().isoformat()}
# ============================================
"""

_SECTION_COMMENTS = {
    "limits": (
        "Limits",
        "Obergrenzen pro Semester: SKS-Summe und Anzahl Mata Kuliah.",
    ),
    "palette": (
        "Farbpalette",
        "Mindestens so viele Farben wie matkul_limit.",
    ),
    "validation": (
        "Validierung",
        None,
    ),
    "jurusan_filters": (
        "Jurusan-Filter",
        None,
    ),
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "planner_config.yaml"

    def first_run_check(self) -> bool:
        """Gibt True zurück wenn noch keine Config existiert (Erstaufruf)."""
        return not self.DEFAULT_CONFIG.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> PlannerConfig:
        """Lade Config aus YAML. Validiert automatisch via Pydantic."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            raise FileNotFoundError(
                f"Konfigurationsdatei nicht gefunden: {target}\n"
                f"Führen Sie 'python main.py setup' aus."
            )
        with open(target, "r", encoding="utf-8") as f:
            raw = yaml.load(f)
        try:
            return PlannerConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e

    def load_or_default(self, path: Optional[Path] = None) -> PlannerConfig:
        """Wie load(), aber ohne Datei gelten die Defaults."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            return default_planner_config()
        return self.load(target)

    # ─── Speichern ───

    def save(self, config: PlannerConfig, path: Optional[Path] = None) -> None:
        """Speichere Config als YAML mit Kommentaren."""
        target = path or self.DEFAULT_CONFIG
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        console.print(f"[green]✓[/green] Konfiguration gespeichert: {target}")

    def _build_commented_yaml(self, config: PlannerConfig) -> CommentedMap:
        """Baut die YAML-Struktur mit Kommentaren auf."""
        raw = json.loads(config.model_dump_json())
        cm = CommentedMap(raw)

        for field, (label, comment) in _SECTION_COMMENTS.items():
            cm.yaml_set_comment_before_after_key(
                field,
                before=f"\n─── {label} ───" + (f"\n{comment}" if comment else ""),
            )

        if "validation" in cm:
            validation_map = CommentedMap(cm["validation"])
            validation_map.yaml_add_eol_comment("0 = sofort", "delay_seconds")
            cm["validation"] = validation_map

        return cm
