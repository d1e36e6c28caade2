from models.course import Kelas, MataKuliah, MataKuliahWithColor
from models.catalog import Catalog
from models.diagnostic import Diagnostic, Severity, ValidationReport
from models.scenario import Scenario, ScenarioError

__all__ = [
    "Kelas",
    "MataKuliah",
    "MataKuliahWithColor",
    "Catalog",
    "Diagnostic",
    "Severity",
    "ValidationReport",
    "Scenario",
    "ScenarioError",
]
