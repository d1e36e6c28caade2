"""Ergebnis des Prüflaufs vor dem Absenden: Diagnosen mit Schweregrad."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    FATAL = "fatal"


class Diagnostic(BaseModel):
    """Eine einzelne Meldung des Prüflaufs."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    message: str
    rule: str                    # z.B. "duplicate_kelas"
    kode: Optional[str] = None   # betroffene Mata Kuliah, falls eine


class ValidationReport(BaseModel):
    """Alle Diagnosen eines Prüflaufs, in Ausgabe-Reihenfolge."""

    diagnostics: list[Diagnostic] = []

    @property
    def fatal(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.FATAL]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.WARNING]

    @property
    def is_submittable(self) -> bool:
        """True wenn nichts Fatales gefunden wurde (Warnungen blockieren nicht)."""
        return not self.fatal

    def messages(self) -> list[str]:
        return [d.message for d in self.diagnostics]

    def __len__(self) -> int:
        return len(self.diagnostics)

    def print_rich(self) -> None:
        """Gibt den Report formatiert über Rich aus."""
        from rich.console import Console
        from rich.panel import Panel
        from rich.table import Table
        from rich import box

        console = Console()
        status = (
            "[bold green]✓ SIAP DIKIRIM[/bold green]"
            if self.is_submittable
            else "[bold red]✗ BELUM BISA DIKIRIM[/bold red]"
        )
        lines = [status, f"Fatal: {len(self.fatal)} | Peringatan: {len(self.warnings)}"]
        console.print(Panel("\n".join(lines), title="Validasi PRS", border_style="cyan"))

        if not self.diagnostics:
            console.print("[dim]Tidak ada masalah.[/dim]")
            return

        colors = {Severity.FATAL: "red", Severity.WARNING: "yellow", Severity.INFO: "blue"}
        table = Table(box=box.ROUNDED, show_lines=True)
        table.add_column("Tipe", width=8)
        table.add_column("Kode", width=10)
        table.add_column("Pesan")
        for d in self.diagnostics:
            color = colors[d.severity]
            table.add_row(
                f"[{color}]{d.severity.value.upper()}[/{color}]",
                d.kode or "-",
                d.message,
            )
        console.print(table)
