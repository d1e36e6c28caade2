"""Prüflauf vor dem Absenden."""

from .engine import ValidationEngine
from .rules import DEFAULT_RULES

__all__ = ["ValidationEngine", "DEFAULT_RULES"]
