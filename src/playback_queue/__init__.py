"""Bounded playback queue with a cursor, sync boundary and remote reconciliation."""

__version__ = "0.1.0"
