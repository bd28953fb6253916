"""Scheduling of runs against the typed resources of a location."""

__version__ = "0.1.0"