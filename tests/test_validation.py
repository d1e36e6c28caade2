"""Tests für den Prüflauf, die Sitzung und Szenario-Dateien."""

import asyncio
import json
from pathlib import Path

import pytest

from config.defaults import default_planner_config
from config.schema import PlannerConfig, ValidationConfig
from models.catalog import Catalog
from models.course import Kelas, MataKuliah
from models.diagnostic import Diagnostic, Severity, ValidationReport
from models.scenario import Scenario, ScenarioError
from planner import RegistrationPlanner
from utils.text import proper_case
from validation.engine import ValidationEngine

NOTHING_CHOSEN = "Tidak ada mata kuliah yang dipilih"


def _mk(kode: str, sks: int = 3, nama: str = "ALGORITMA DAN PEMROGRAMAN") -> MataKuliah:
    return MataKuliah(kode=kode, nama=nama, sks=sks,
                      kelas=[Kelas(kelas="A"), Kelas(kelas="B")])


def _instant_config() -> PlannerConfig:
    return default_planner_config().model_copy(
        update={"validation": ValidationConfig(delay_seconds=0.0)}
    )


@pytest.fixture
def planner() -> RegistrationPlanner:
    return RegistrationPlanner(_instant_config())


def _validate(planner: RegistrationPlanner) -> ValidationReport:
    return asyncio.run(planner.engine.validate())


# ─── REGELN ───────────────────────────────────────────────────────────────────

class TestValidationRules:
    def test_empty_state_only_nothing_chosen(self, planner: RegistrationPlanner):
        report = _validate(planner)
        assert len(report) == 1
        assert report.diagnostics[0].severity == Severity.FATAL
        assert report.diagnostics[0].message == NOTHING_CHOSEN
        assert not report.is_submittable

    def test_empty_plan_list_missing_kelas(self, planner: RegistrationPlanner):
        """{IF101: []}: Eintrag existiert, aber ohne Kelas."""
        planner.selection.add(_mk("IF101"))
        planner.plans.set_plan("IF101", 0, "A")
        planner.plans.remove_plan("IF101", 0)
        assert planner.plans.get_plans("IF101") == ()

        report = _validate(planner)
        assert [d.rule for d in report.diagnostics] == ["missing_kelas"]
        assert report.diagnostics[0].kode == "IF101"
        assert report.diagnostics[0].message == (
            "Mata kuliah Algoritma dan Pemrograman harus memiliki "
            "setidaknya satu kelas yang dipilih"
        )
        assert NOTHING_CHOSEN not in report.messages()

    def test_duplicate_kelas(self, planner: RegistrationPlanner):
        planner.selection.add(_mk("IF101"))
        planner.plans.set_plan("IF101", 0, "A")
        planner.plans.set_plan("IF101", 1, "A")

        report = _validate(planner)
        assert len(report.fatal) == 1
        d = report.fatal[0]
        assert d.rule == "duplicate_kelas"
        assert d.kode == "IF101"
        assert "Algoritma dan Pemrograman" in d.message

    def test_valid_plan_no_fatal(self, planner: RegistrationPlanner):
        planner.selection.add(_mk("IF101"))
        planner.plans.set_plan("IF101", 0, "A")
        planner.plans.set_plan("IF101", 1, "B")

        report = _validate(planner)
        assert report.fatal == []
        assert report.is_submittable

    def test_chosen_without_any_plan(self, planner: RegistrationPlanner):
        planner.selection.add(_mk("IF101"))
        report = _validate(planner)
        assert [d.rule for d in report.diagnostics] == ["missing_kelas", "nothing_chosen"]

    def test_gaps_are_ignored(self, planner: RegistrationPlanner):
        planner.selection.add(_mk("IF101"))
        planner.plans.set_plan("IF101", 2, "A")
        report = _validate(planner)
        assert report.is_submittable

    def test_only_gaps_count_as_missing(self, planner: RegistrationPlanner):
        planner.selection.add(_mk("IF101"))
        planner.plans.set_plan("IF101", 1, "A")
        planner.plans.remove_plan("IF101", 1)
        assert planner.plans.get_plans("IF101") == (None,)
        report = _validate(planner)
        assert [d.rule for d in report.diagnostics] == ["missing_kelas"]

    def test_plans_for_unchosen_course_ignored(self, planner: RegistrationPlanner):
        planner.plans.set_plan("XX999", 0, "A")
        planner.plans.set_plan("XX999", 1, "A")
        report = _validate(planner)
        assert report.messages() == [NOTHING_CHOSEN]

    def test_message_order_follows_snapshot(self, planner: RegistrationPlanner):
        planner.selection.add(_mk("IF101", nama="BASIS DATA"))
        planner.selection.add(_mk("IF102", nama="JARINGAN KOMPUTER"))
        planner.selection.add(_mk("IF103", nama="KALKULUS II"))
        planner.plans.set_plan("IF102", 0, "A")
        planner.plans.set_plan("IF102", 1, "A")
        planner.plans.set_plan("IF101", 0, "B")
        planner.plans.set_plan("IF101", 1, "B")

        report = _validate(planner)
        # Duplikate in Plan-Reihenfolge, fehlende in Auswahl-Reihenfolge (neueste zuerst)
        assert [(d.rule, d.kode) for d in report.diagnostics] == [
            ("duplicate_kelas", "IF102"),
            ("duplicate_kelas", "IF101"),
            ("missing_kelas", "IF103"),
        ]
        assert "Kalkulus II" in report.diagnostics[2].message


# ─── ENGINE ───────────────────────────────────────────────────────────────────

class TestValidationEngine:
    def test_snapshot_semantics(self):
        """Änderungen während der Wartezeit tauchen im Ergebnis nicht auf."""
        planner = RegistrationPlanner(default_planner_config())
        planner.engine.delay_seconds = 0.05
        planner.selection.add(_mk("IF101"))
        planner.plans.set_plan("IF101", 0, "A")

        async def scenario():
            task = asyncio.create_task(planner.engine.validate())
            await asyncio.sleep(0)  # Prüflauf liest Snapshot und schläft
            planner.plans.set_plan("IF101", 1, "A")
            planner.selection.add(_mk("IF102"))
            return await task

        report = asyncio.run(scenario())
        assert report.is_submittable
        assert report.diagnostics == []
        assert not planner.engine.check().is_submittable

    def test_delay_uses_injected_sleep(self, planner: RegistrationPlanner):
        slept: list[float] = []

        async def fake_sleep(seconds: float) -> None:
            slept.append(seconds)

        engine = ValidationEngine(planner.selection, planner.plans,
                                  delay_seconds=2.0, sleep=fake_sleep)
        asyncio.run(engine.validate())
        assert slept == [2.0]

    def test_custom_rule_warning(self, planner: RegistrationPlanner):
        def always_warn(chosen, plans, fmt):
            return [Diagnostic(severity=Severity.WARNING, rule="collision",
                               message="Jadwal bentrok")]

        engine = ValidationEngine(planner.selection, planner.plans,
                                  delay_seconds=0.0, rules=[always_warn])
        report = engine.check()
        assert len(report.warnings) == 1
        assert report.is_submittable

    def test_custom_formatter(self, planner: RegistrationPlanner):
        planner.selection.add(_mk("IF101"))
        engine = ValidationEngine(planner.selection, planner.plans,
                                  formatter=str.lower)
        report = engine.check()
        assert "algoritma dan pemrograman" in report.diagnostics[0].message


class TestProperCase:
    def test_basic(self):
        assert proper_case("ALGORITMA DAN PEMROGRAMAN") == "Algoritma dan Pemrograman"

    def test_roman_numeral_and_hyphen(self):
        assert proper_case("kalkulus ii") == "Kalkulus II"
        assert proper_case("SISTEM TERTANAM-LANJUT") == "Sistem Tertanam-Lanjut"

    def test_first_word_capitalized(self):
        assert proper_case("dan lain") == "Dan Lain"


# ─── SITZUNG ──────────────────────────────────────────────────────────────────

class TestRegistrationPlanner:
    def test_instances_are_independent(self):
        a = RegistrationPlanner(_instant_config())
        b = RegistrationPlanner(_instant_config())
        a.selection.add(_mk("IF101"))
        a.plans.set_plan("IF101", 0, "A")
        assert b.selection.count == 0
        assert len(b.plans) == 0
        assert len(b.colors) == 12

    def test_submit_blocked_by_fatal(self, planner: RegistrationPlanner):
        report = asyncio.run(planner.submit())
        assert not report.is_submittable
        assert planner.submitted.get() is False

    def test_submit_success(self, planner: RegistrationPlanner):
        planner.selection.add(_mk("IF101"))
        planner.plans.set_plan("IF101", 0, "A")
        report = asyncio.run(planner.submit())
        assert report.is_submittable
        assert planner.submitted.get() is True

    def test_remove_course_drops_plan(self, planner: RegistrationPlanner):
        planner.selection.add(_mk("IF101"))
        planner.plans.set_plan("IF101", 0, "A")
        assert planner.remove_course("IF101")
        assert not planner.plans.has_entry("IF101")
        assert not planner.selection.has("IF101")

    def test_reset(self, planner: RegistrationPlanner):
        planner.selection.add(_mk("IF101"))
        planner.plans.set_plan("IF101", 0, "A")
        planner.submitted.set(True)
        planner.reset()
        assert planner.selection.count == 0
        assert len(planner.plans) == 0
        assert planner.submitted.get() is False
        assert len(planner.colors) == 12

    def test_jurusan_filters_default(self, planner: RegistrationPlanner):
        assert planner.jurusan_filters.get() == ["Informatika", "DMU"]

    def test_visible_courses(self, planner: RegistrationPlanner):
        catalog = Catalog(courses=[
            _mk("IF101").model_copy(update={"jurusan": "Informatika"}),
            _mk("HK101").model_copy(update={"jurusan": "Hukum"}),
            _mk("MKU01"),
        ])
        assert [mk.kode for mk in planner.visible_courses(catalog)] == ["IF101", "MKU01"]

        planner.jurusan_filters.set(["Hukum"])
        assert [mk.kode for mk in planner.visible_courses(catalog)] == ["HK101", "MKU01"]

        planner.jurusan_filters.set([])
        assert len(planner.visible_courses(catalog)) == 3

    def test_engine_settings_from_config(self, planner: RegistrationPlanner):
        assert planner.engine.delay_seconds == 0.0
        assert RegistrationPlanner().engine.delay_seconds == 2.0

    def test_delay_override_and_injected_sleep(self):
        slept: list[float] = []

        async def fake_sleep(seconds: float) -> None:
            slept.append(seconds)

        planner = RegistrationPlanner(default_planner_config(),
                                      delay_seconds=0.5, sleep=fake_sleep)
        assert planner.engine.delay_seconds == 0.5
        asyncio.run(planner.submit())
        assert slept == [0.5]

    def test_custom_rules_passed_through(self):
        planner = RegistrationPlanner(_instant_config(), rules=[])
        report = asyncio.run(planner.submit())
        assert report.diagnostics == []
        assert planner.submitted.get() is True


# ─── SZENARIO-DATEIEN ─────────────────────────────────────────────────────────

class TestScenario:
    def test_inline_courses(self, tmp_path: Path):
        path = tmp_path / "s.yaml"
        path.write_text(
            "courses:\n"
            "  - {kode: IF101, nama: BASIS DATA, sks: 3, kelas: [{kelas: A}, {kelas: B}]}\n"
            "  - {kode: IF102, nama: STATISTIKA, sks: 2}\n"
            "plans:\n"
            "  IF101: [A, null, B]\n"
            "  IF102: []\n",
            encoding="utf-8",
        )
        planner = RegistrationPlanner(_instant_config())
        rejected = Scenario.load_yaml(path).apply(planner, tmp_path)

        assert rejected == []
        assert [mk.kode for mk in planner.selection.chosen] == ["IF102", "IF101"]
        assert planner.plans.get_plans("IF101") == ("A", None, "B")
        assert planner.plans.get_plans("IF102") == ()
        report = planner.engine.check()
        assert [(d.rule, d.kode) for d in report.diagnostics] == [("missing_kelas", "IF102")]

    def test_empty_plan_without_intermediate_state(self, tmp_path: Path):
        """Leere Liste erscheint für Listener direkt als (), ohne Zwischenzustand."""
        path = tmp_path / "s.yaml"
        path.write_text(
            "courses:\n"
            "  - {kode: IF101, nama: BASIS DATA, sks: 3}\n"
            "plans:\n"
            "  IF101: []\n",
            encoding="utf-8",
        )
        planner = RegistrationPlanner(_instant_config())
        seen: list[dict] = []
        planner.plans.store.subscribe(seen.append)
        Scenario.load_yaml(path).apply(planner, tmp_path)
        assert seen == [{}, {"IF101": ()}]

    def test_catalog_reference(self, tmp_path: Path):
        (tmp_path / "katalog.json").write_text(json.dumps([
            {"kode": "IF101", "nama": "BASIS DATA", "sks": 3,
             "kelas": [{"kelas": "A", "jadwal": "Senin 07:00"}]},
            {"kode": "IF201", "nama": "KECERDASAN BUATAN", "sks": 3, "kelas": []},
        ]), encoding="utf-8")
        path = tmp_path / "s.yaml"
        path.write_text("catalog: katalog.json\nchosen: [IF201]\n", encoding="utf-8")

        planner = RegistrationPlanner(_instant_config())
        Scenario.load_yaml(path).apply(planner, tmp_path)
        assert planner.selection.has("IF201")
        assert not planner.selection.has("IF101")

    def test_unknown_chosen_raises(self, tmp_path: Path):
        path = tmp_path / "s.yaml"
        path.write_text("chosen: [NOPE]\n", encoding="utf-8")
        with pytest.raises(ScenarioError):
            Scenario.load_yaml(path).resolve_courses(tmp_path)

    def test_over_limit_rejected(self, tmp_path: Path):
        courses = "\n".join(
            f"  - {{kode: MK{i}, nama: MK {i}, sks: 6}}" for i in range(5)
        )
        path = tmp_path / "s.yaml"
        path.write_text(f"courses:\n{courses}\n", encoding="utf-8")
        planner = RegistrationPlanner(_instant_config())
        rejected = Scenario.load_yaml(path).apply(planner, tmp_path)
        assert [mk.kode for mk in rejected] == ["MK4"]
        assert planner.selection.total_sks == 24

    def test_invalid_file_raises(self, tmp_path: Path):
        path = tmp_path / "s.yaml"
        path.write_text("courses:\n  - {kode: IF101, nama: X, sks: 0}\n", encoding="utf-8")
        with pytest.raises(ScenarioError):
            Scenario.load_yaml(path)
