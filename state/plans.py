"""PlanStore – gewählte Kelas pro Mata Kuliah als Prioritätsliste.

Index = Priorität (0 = erste Wahl). Prioritäten werden einzeln gesetzt,
daher darf die Liste Lücken haben: ein ungesetzter Index ist None.
Beim Schreiben wird NICHT geprüft, ob die Mata Kuliah gewählt ist;
das passiert erst im Prüflauf.
"""

import logging
from typing import Optional, Sequence

from state.observable import ObservableStore

logger = logging.getLogger(__name__)

Plan = tuple[Optional[str], ...]
PlanState = dict[str, Plan]


class PlanStore:
    """Verwaltet die Prioritätslisten aller Mata Kuliah."""

    def __init__(self) -> None:
        self.store: ObservableStore[PlanState] = ObservableStore({})

    # ─── Lesen ───

    def snapshot(self) -> PlanState:
        """Kopie des aktuellen Zustands (Tupel sind unveränderlich)."""
        return dict(self.store.get())

    def get_plans(self, kode: str) -> Plan:
        """Prioritätsliste einer Mata Kuliah, leer wenn keine existiert."""
        return self.store.get().get(kode, ())

    def chosen_sections(self, kode: str) -> list[str]:
        """Nur die gesetzten Kelas, in Prioritäts-Reihenfolge."""
        return [k for k in self.get_plans(kode) if k is not None]

    def has_entry(self, kode: str) -> bool:
        return kode in self.store.get()

    # ─── Schreiben ───

    def set_plan(self, kode: str, priority: int, kelas: str) -> None:
        """Setzt den Kelas für eine Priorität; die Liste wächst bei Bedarf mit Lücken."""
        if priority < 0:
            raise ValueError(f"Priorität muss >= 0 sein, nicht {priority}")

        def _apply(state: PlanState) -> PlanState:
            plan = list(state.get(kode, ()))
            if priority >= len(plan):
                plan.extend([None] * (priority + 1 - len(plan)))
            plan[priority] = kelas
            return {**state, kode: tuple(plan)}

        self.store.update(_apply)
        logger.debug(f"Plan {kode}[{priority}] = {kelas}")

    def trim_plans(self, kode: str, max_plans: int) -> None:
        """Kürzt die Liste auf die ersten max_plans Prioritäten."""
        if max_plans < 0:
            raise ValueError(f"max_plans muss >= 0 sein, nicht {max_plans}")

        def _apply(state: PlanState) -> PlanState:
            if kode not in state:
                return state
            return {**state, kode: state[kode][:max_plans]}

        self.store.update(_apply)

    def remove_plan(self, kode: str, priority: int) -> None:
        """Entfernt eine Priorität. Alle späteren rücken eins nach vorne!

        Aus [A, B, C] wird nach remove_plan(kode, 0) also [B, C]:
        B ist danach erste Wahl.
        """

        def _apply(state: PlanState) -> PlanState:
            plan = state.get(kode)
            if plan is None or not 0 <= priority < len(plan):
                return state
            return {**state, kode: plan[:priority] + plan[priority + 1:]}

        self.store.update(_apply)
        logger.debug(f"Plan {kode}[{priority}] entfernt")

    def replace(self, kode: str, plan: Sequence[Optional[str]]) -> None:
        """Legt die komplette Liste einer Mata Kuliah an oder ersetzt sie (auch leer)."""
        new_plan: Plan = tuple(plan)
        self.store.update(lambda state: {**state, kode: new_plan})
        logger.debug(f"Plan {kode} = {new_plan}")

    def drop(self, kode: str) -> None:
        """Löscht die komplette Liste einer Mata Kuliah."""
        self.store.update(
            lambda state: {k: v for k, v in state.items() if k != kode}
        )

    def reset(self) -> None:
        self.store.set({})

    def __len__(self) -> int:
        return len(self.store.get())

    def __repr__(self) -> str:
        return f"PlanStore({len(self)} Mata Kuliah)"
