"""Skirmish: turn-based combat resolution."""

__version__ = "0.1.0"
