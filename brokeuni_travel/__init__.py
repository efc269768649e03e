"""Broke Uni Student day-trip planner."""

__version__ = "0.1.0"
