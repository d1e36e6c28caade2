"""Text-Hilfsfunktionen für Meldungen."""

# Kurze Bindewörter bleiben klein (außer am Anfang)
_LOWER_WORDS = {"dan", "di", "ke", "dari", "untuk", "pada", "yang", "atau"}

# Römische Ziffern ("Kalkulus II") bleiben groß
_ROMAN = {"I", "II", "III", "IV", "V", "VI", "VII", "VIII"}


def _capitalize(word: str) -> str:
    return "-".join(p[:1].upper() + p[1:].lower() for p in word.split("-"))


def proper_case(text: str) -> str:
    """Formatiert einen Mata-Kuliah-Namen für die Anzeige.

    "ALGORITMA DAN PEMROGRAMAN II" → "Algoritma dan Pemrograman II"
    """
    out: list[str] = []
    for i, word in enumerate(text.split()):
        if word.upper() in _ROMAN:
            out.append(word.upper())
        elif i > 0 and word.lower() in _LOWER_WORDS:
            out.append(word.lower())
        else:
            out.append(_capitalize(word))
    return " ".join(out)
