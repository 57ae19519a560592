"""Obstetric decision-support rule engines."""

__version__ = "0.1.0"
