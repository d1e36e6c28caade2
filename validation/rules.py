"""Einzelne Prüfregeln des Prüflaufs vor dem Absenden.

Jede Regel ist eine reine Funktion über einem Snapshot:
    rule(chosen, plans, fmt) -> list[Diagnostic]

Eine Plan-Liste "gehört" zu einer gewählten Mata Kuliah, wenn ihr kode
in der Auswahl vorkommt; Listen ohne gewählte Mata Kuliah werden ignoriert.
"""

from collections import Counter
from typing import Callable, NamedTuple, Sequence

from models.course import MataKuliahWithColor
from models.diagnostic import Diagnostic, Severity
from state.plans import Plan, PlanState

Formatter = Callable[[str], str]
Rule = Callable[[Sequence[MataKuliahWithColor], PlanState, Formatter], list[Diagnostic]]


class PlannedCourse(NamedTuple):
    kode: str
    matkul: MataKuliahWithColor
    plans: Plan


def planned_courses(
    chosen: Sequence[MataKuliahWithColor], plans: PlanState
) -> list[PlannedCourse]:
    """Plan-Einträge, die zu einer gewählten Mata Kuliah gehören (Plan-Reihenfolge)."""
    by_kode = {mk.kode: mk for mk in chosen}
    return [
        PlannedCourse(kode, by_kode[kode], plan)
        for kode, plan in plans.items()
        if kode in by_kode
    ]


def _set_sections(plan: Plan) -> list[str]:
    # Lücken (None) zählen nicht als Wahl
    return [k for k in plan if k is not None]


def check_duplicate_kelas(
    chosen: Sequence[MataKuliahWithColor], plans: PlanState, fmt: Formatter
) -> list[Diagnostic]:
    """Derselbe Kelas darf pro Mata Kuliah nur in einer Priorität stehen (fatal)."""
    diagnostics: list[Diagnostic] = []
    for pc in planned_courses(chosen, plans):
        counts = Counter(_set_sections(pc.plans))
        if any(n > 1 for n in counts.values()):
            diagnostics.append(Diagnostic(
                severity=Severity.FATAL,
                rule="duplicate_kelas",
                kode=pc.kode,
                message=(
                    "Kelas yang sama digunakan dalam prioritas yang berbeda "
                    f"pada mata kuliah {fmt(pc.matkul.nama)}"
                ),
            ))
    return diagnostics


def check_missing_kelas(
    chosen: Sequence[MataKuliahWithColor], plans: PlanState, fmt: Formatter
) -> list[Diagnostic]:
    """Jede gewählte Mata Kuliah braucht mindestens einen Kelas (fatal)."""
    diagnostics: list[Diagnostic] = []
    for mk in chosen:
        if not _set_sections(plans.get(mk.kode, ())):
            diagnostics.append(Diagnostic(
                severity=Severity.FATAL,
                rule="missing_kelas",
                kode=mk.kode,
                message=(
                    f"Mata kuliah {fmt(mk.nama)} harus memiliki "
                    "setidaknya satu kelas yang dipilih"
                ),
            ))
    return diagnostics


def check_nothing_chosen(
    chosen: Sequence[MataKuliahWithColor], plans: PlanState, fmt: Formatter
) -> list[Diagnostic]:
    """Überhaupt kein Plan für eine gewählte Mata Kuliah vorhanden (fatal)."""
    if planned_courses(chosen, plans):
        return []
    return [Diagnostic(
        severity=Severity.FATAL,
        rule="nothing_chosen",
        message="Tidak ada mata kuliah yang dipilih",
    )]


# TODO: Kollisionsprüfung je Priorität (Severity.WARNING) ergänzen, sobald
# der Katalog Jadwal-Daten pro Kelas liefert.
DEFAULT_RULES: tuple[Rule, ...] = (
    check_duplicate_kelas,
    check_missing_kelas,
    check_nothing_chosen,
)
