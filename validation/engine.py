"""ValidationEngine – Prüflauf über Auswahl und Pläne vor dem Absenden.

Der Prüflauf liest beide Stores einmal am Anfang und rechnet nur mit
diesem Snapshot. Während der anschließenden Wartezeit dürfen die Stores
weiter verändert werden; das Ergebnis beschreibt trotzdem den Zustand
zum Aufrufzeitpunkt. Wer danach noch ändert, muss neu prüfen.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Sequence

from models.diagnostic import Diagnostic, ValidationReport
from state.plans import PlanStore
from state.selection import SelectionStore
from utils.text import proper_case
from validation.rules import DEFAULT_RULES, Formatter, Rule

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class ValidationEngine:
    """Führt alle Prüfregeln über Snapshot(s) von SelectionStore und PlanStore aus."""

    def __init__(
        self,
        selection: SelectionStore,
        plans: PlanStore,
        delay_seconds: float = 2.0,
        rules: Optional[Sequence[Rule]] = None,
        formatter: Formatter = proper_case,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.selection = selection
        self.plans = plans
        self.delay_seconds = delay_seconds
        self.rules: tuple[Rule, ...] = tuple(rules) if rules is not None else DEFAULT_RULES
        self.formatter = formatter
        self._sleep = sleep

    def check(self) -> ValidationReport:
        """Synchroner Prüflauf ohne Wartezeit."""
        chosen = self.selection.chosen
        plans = self.plans.snapshot()

        diagnostics: list[Diagnostic] = []
        for rule in self.rules:
            diagnostics.extend(rule(chosen, plans, self.formatter))

        report = ValidationReport(diagnostics=diagnostics)
        logger.info(
            f"Prüflauf: {len(chosen)} MK, {len(plans)} Pläne → "
            f"{len(report.fatal)} fatal, {len(report.warnings)} Warnungen"
        )
        return report

    async def validate(self) -> ValidationReport:
        """Prüflauf mit fester Wartezeit. Kein Abbruch-Mechanismus, kein Timeout."""
        report = self.check()
        await self._sleep(self.delay_seconds)
        return report
