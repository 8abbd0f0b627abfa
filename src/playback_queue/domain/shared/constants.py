"""Centralized constants for playlist limits and configuration keys."""

from __future__ import annotations


class PlaylistConstants:
    """Limits and sentinels of the playback queue."""

    # Sliding window capacity, anchored at the tail
    MAX_SIZE = 40

    # Cursor value meaning "nothing is current"
    NO_CURRENT = -1


class SyncConstants:
    """Reconciliation defaults."""

    DEFAULT_INTERVAL_SECONDS = 30


class ConfigKeys:
    """Environment variable names read outside the settings layer."""

    NO_COLOR = "NO_COLOR"
