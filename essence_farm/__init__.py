"""Essence farm planner: best farming areas and tag matches for weapons."""

__version__ = "0.1.0"
