"""RegistrationPlanner – alle Stores einer Planungs-Sitzung an einem Ort.

Jede Instanz besitzt eigene Stores; mehrere Sitzungen (z.B. pro Test)
beeinflussen sich nicht.
"""

import asyncio
import logging
from typing import Optional, Sequence

from config.defaults import default_planner_config
from config.schema import PlannerConfig
from models.catalog import Catalog
from models.course import MataKuliah
from models.diagnostic import ValidationReport
from state.colors import ColorAllocator
from state.observable import ObservableStore
from state.plans import PlanStore
from state.selection import SelectionStore
from utils.text import proper_case
from validation.engine import Sleep, ValidationEngine
from validation.rules import Formatter, Rule

logger = logging.getLogger(__name__)


class RegistrationPlanner:
    """Sitzung: Auswahl, Pläne, Farben, Filter und Prüflauf."""

    def __init__(
        self,
        config: Optional[PlannerConfig] = None,
        delay_seconds: Optional[float] = None,
        rules: Optional[Sequence[Rule]] = None,
        formatter: Formatter = proper_case,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        """delay_seconds überschreibt config.validation.delay_seconds, falls gesetzt."""
        self.config = config or default_planner_config()
        if delay_seconds is None:
            delay_seconds = self.config.validation.delay_seconds
        self.colors = ColorAllocator(self.config.palette.colors)
        self.selection = SelectionStore(self.config.limits, self.colors)
        self.plans = PlanStore()
        self.engine = ValidationEngine(
            self.selection,
            self.plans,
            delay_seconds=delay_seconds,
            rules=rules,
            formatter=formatter,
            sleep=sleep,
        )
        self.submitted: ObservableStore[bool] = ObservableStore(False)
        self.jurusan_filters: ObservableStore[list[str]] = ObservableStore(
            list(self.config.jurusan_filters)
        )

    def visible_courses(self, catalog: Catalog) -> list[MataKuliah]:
        """Katalog gefiltert nach den aktiven Jurusan-Filtern."""
        return catalog.filter_jurusan(self.jurusan_filters.get())

    def remove_course(self, kode: str) -> bool:
        """Abwählen und zugehörige Prioritätsliste verwerfen."""
        self.plans.drop(kode)
        return self.selection.remove(kode)

    async def submit(self) -> ValidationReport:
        """Prüft die Auswahl; ohne fatale Meldung gilt der PRS als abgeschickt."""
        report = await self.engine.validate()
        if report.is_submittable:
            self.submitted.set(True)
            logger.info("PRS abgeschickt")
        else:
            logger.info(f"PRS blockiert: {len(report.fatal)} fatale Meldungen")
        return report

    def reset(self) -> None:
        self.selection.reset()
        self.plans.reset()
        self.submitted.set(False)

    def __repr__(self) -> str:
        return f"RegistrationPlanner({self.selection!r}, {self.plans!r})"
