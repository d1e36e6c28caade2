from config.schema import (
    MATKUL_COLOR_CLASSES,
    LimitConfig,
    PaletteConfig,
    PlannerConfig,
    ValidationConfig,
)


def default_palette() -> PaletteConfig:
    """Standard-Palette mit 12 Farben."""
    return PaletteConfig(colors=list(MATKUL_COLOR_CLASSES))


def default_limits() -> LimitConfig:
    """Standard: max. 24 SKS und max. 12 Mata Kuliah."""
    return LimitConfig(sks_limit=24, matkul_limit=12)


def default_planner_config() -> PlannerConfig:
    """Komplette Default-Konfiguration."""
    return PlannerConfig(
        limits=default_limits(),
        palette=default_palette(),
        validation=ValidationConfig(delay_seconds=2.0),
    )
