"""Kleine Hilfsfunktionen."""
