"""Renderers that draw a TaskStore (plain text / HTML)."""
