"""Rencana-PRS: Haupt-CLI.

Verwendung:
  python main.py setup                        Default-Konfiguration anlegen
  python main.py config show                  Konfiguration anzeigen
  python main.py catalog <katalog.json>       Katalog anzeigen
  python main.py catalog <datei> --jurusan X  Katalog nach Jurusan filtern
  python main.py catalog <datei> --all        Katalog ohne Filter
  python main.py validate <szenario.yaml>     Auswahl + Pläne prüfen
"""

import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()


def _load_config():
    """Lädt die Konfiguration; ohne Datei gelten die Defaults."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        return mgr.load_or_default()
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


# ─── SETUP ────────────────────────────────────────────────────────────────────

@click.command("setup")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Konfiguration überschreiben.")
def cmd_setup(force: bool):
    """Legt die Default-Konfiguration als YAML an."""
    from config.defaults import default_planner_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            "[yellow]Eine Konfiguration existiert bereits.[/yellow]\n"
            "Mit [bold]--force[/bold] wird sie überschrieben."
        )
        return
    mgr.save(default_planner_config())


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen."""


@cmd_config.command("show")
def config_show():
    """Zeigt die aktuelle Konfiguration an."""
    config = _load_config()

    console.print(Panel(
        f"[bold]{config.university_name}[/bold]  |  "
        f"max. {config.limits.sks_limit} SKS  |  "
        f"max. {config.limits.matkul_limit} Mata Kuliah",
        title="Konfigurasi",
        border_style="cyan",
    ))

    table = Table(title="Palette", box=box.ROUNDED)
    table.add_column("#")
    table.add_column("Warna")
    for i, color in enumerate(config.palette.colors, start=1):
        table.add_row(str(i), color)
    console.print(table)

    console.print(
        f"\n[bold]Validasi:[/bold] {config.validation.delay_seconds:.1f}s | "
        f"[bold]Jurusan:[/bold] {', '.join(config.jurusan_filters) or '-'}"
    )


# ─── CATALOG ──────────────────────────────────────────────────────────────────

@click.command("catalog")
@click.argument("datei", type=click.Path(exists=True, path_type=Path))
@click.option("--jurusan", "-j", multiple=True,
              help="Nur diese Jurusan anzeigen (mehrfach möglich). "
                   "Default: jurusan_filters aus der Konfiguration.")
@click.option("--all", "show_all", is_flag=True, default=False,
              help="Alle Mata Kuliah ohne Jurusan-Filter anzeigen.")
def cmd_catalog(datei: Path, jurusan: tuple[str, ...], show_all: bool):
    """Zeigt die Mata Kuliah eines Katalogs (JSON) an."""
    from models.catalog import Catalog
    from planner import RegistrationPlanner
    from utils.text import proper_case

    try:
        catalog = Catalog.load_json(datei)
    except ValueError as e:
        console.print(f"[red bold]Katalog ungültig:[/red bold]\n{e}")
        sys.exit(1)

    planner = RegistrationPlanner(_load_config())
    if show_all:
        planner.jurusan_filters.set([])
    elif jurusan:
        planner.jurusan_filters.set(list(jurusan))
    courses = planner.visible_courses(catalog)

    filters = planner.jurusan_filters.get()
    table = Table(title=f"Katalog: {datei.name}", box=box.ROUNDED,
                  caption=f"Jurusan: {', '.join(filters) or 'semua'}")
    table.add_column("Kode", style="bold")
    table.add_column("Nama")
    table.add_column("SKS", justify="right")
    table.add_column("Kelas")
    table.add_column("Jurusan")
    for mk in courses:
        table.add_row(mk.kode, proper_case(mk.nama), str(mk.sks),
                      ", ".join(mk.kelas_names), mk.jurusan or "-")
    console.print(table)
    console.print(f"[dim]{catalog.summary()}[/dim]")


# ─── VALIDATE ─────────────────────────────────────────────────────────────────

@click.command("validate")
@click.argument("datei", type=click.Path(exists=True, path_type=Path))
@click.option("--no-delay", is_flag=True, default=False,
              help="Ohne simulierte Prüfdauer.")
def cmd_validate(datei: Path, no_delay: bool):
    """Prüft eine Auswahl mit Prioritäten aus einer Szenario-Datei (YAML)."""
    from models.scenario import Scenario
    from planner import RegistrationPlanner

    config = _load_config()
    if no_delay:
        config = config.model_copy(update={
            "validation": config.validation.model_copy(update={"delay_seconds": 0.0})
        })

    try:
        scenario = Scenario.load_yaml(datei)
        planner = RegistrationPlanner(config)
        rejected = scenario.apply(planner, base_dir=datei.parent)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red bold]Szenario fehlerhaft:[/red bold]\n{e}")
        sys.exit(1)

    for mk in rejected:
        console.print(
            f"[yellow]⚠[/yellow] {mk.kode} nicht gewählt "
            f"(Limit {config.limits.matkul_limit} MK / {config.limits.sks_limit} SKS)"
        )

    sel = planner.selection
    table = Table(title="Mata Kuliah dipilih", box=box.ROUNDED)
    table.add_column("Kode", style="bold")
    table.add_column("SKS", justify="right")
    table.add_column("Warna")
    table.add_column("Prioritas")
    for mk in sel.chosen:
        plan = planner.plans.get_plans(mk.kode)
        table.add_row(mk.kode, str(mk.sks), mk.color_tag,
                      " → ".join(k or "·" for k in plan) or "-")
    console.print(table)
    console.print(f"[bold]Total:[/bold] {sel.count} MK, {sel.total_sks} SKS")

    with console.status("Validasi..."):
        report = asyncio.run(planner.engine.validate())
    report.print_rich()

    sys.exit(0 if report.is_submittable else 1)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Ausführliches Logging.")
def cli(verbose: bool):
    """Rencana-PRS: Mata-Kuliah-Auswahl planen und vor dem Absenden prüfen."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main():
    cli()


# Befehle registrieren
cli.add_command(cmd_setup)
cli.add_command(cmd_config)
cli.add_command(cmd_catalog)
cli.add_command(cmd_validate)


if __name__ == "__main__":
    main()
