from pydantic import BaseModel, Field, model_validator


# ─── LIMITS ───

class LimitConfig(BaseModel):
    """Obergrenzen für die Mata-Kuliah-Auswahl pro Semester."""
    # Maximale Summe der SKS aller gewählten Mata Kuliah
    sks_limit: int = Field(24, ge=1,
        description="Maximale SKS-Summe")
    # Maximale Anzahl gewählter Mata Kuliah
    matkul_limit: int = Field(12, ge=1,
        description="Maximale Anzahl Mata Kuliah")


# ─── FARBPALETTE ───

# Tailwind-Klassen, eine pro Mata Kuliah (12 = matkul_limit)
MATKUL_COLOR_CLASSES = [
    "bg-blue-200",
    "bg-green-200",
    "bg-yellow-200",
    "bg-red-200",
    "bg-purple-200",
    "bg-pink-200",
    "bg-indigo-200",
    "bg-cyan-200",
    "bg-teal-100",
    "bg-lime-200",
    "bg-orange-200",
    "bg-violet-200",
]


class PaletteConfig(BaseModel):
    """Farb-Tags für gewählte Mata Kuliah.

    Jede gewählte Mata Kuliah bekommt genau einen Tag; ein Tag ist
    nie gleichzeitig zwei Mata Kuliah zugeordnet.
    """
    # CSS-Klassen in Vergabe-Reihenfolge
    colors: list[str] = Field(
        default_factory=lambda: list(MATKUL_COLOR_CLASSES),
        description="Farb-Tags in Vergabe-Reihenfolge")

    @model_validator(mode='after')
    def validate_unique_colors(self):
        seen: set[str] = set()
        for c in self.colors:
            if c in seen:
                raise ValueError(f"Farbe '{c}' ist doppelt in der Palette")
            seen.add(c)
        if not self.colors:
            raise ValueError("Palette darf nicht leer sein")
        return self


# ─── VALIDIERUNG ───

class ValidationConfig(BaseModel):
    """Einstellungen für den Prüflauf vor dem Absenden."""
    # Simulierte Prüfdauer in Sekunden
    delay_seconds: float = Field(2.0, ge=0.0,
        description="Simulierte Prüfdauer (Sekunden)")


# ─── GESAMT-CONFIG ───

class PlannerConfig(BaseModel):
    """Gesamtkonfiguration des Planers."""
    # Name der Universität (nur Anzeige)
    university_name: str = Field("Universitas Contoh",
        description="Name der Universität")
    limits: LimitConfig = Field(default_factory=LimitConfig)
    palette: PaletteConfig = Field(default_factory=PaletteConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    # Vorausgewählte Jurusan-Filter für den Katalog
    jurusan_filters: list[str] = Field(
        default=["Informatika", "DMU"],
        description="Standard-Filter für Studiengänge")

    @model_validator(mode='after')
    def validate_palette_size(self):
        """Jede mögliche Mata Kuliah muss eine Farbe bekommen können."""
        if len(self.palette.colors) < self.limits.matkul_limit:
            raise ValueError(
                f"Palette hat nur {len(self.palette.colors)} Farben, "
                f"matkul_limit ist {self.limits.matkul_limit}")
        return self
