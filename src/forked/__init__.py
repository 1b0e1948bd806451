"""Forked: recipe sharing with aggregated shopping lists."""

__version__ = "0.1.0"
