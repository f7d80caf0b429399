"""Scaffold new source components from named templates."""

__version__ = "0.1.0"
