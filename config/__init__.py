"""Konfiguration: Schema, Defaults, YAML-Manager."""
