"""Reusable Pydantic Annotated types for domain-wide validation."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import Field, PlainSerializer, PlainValidator

from playback_queue.domain.shared.messages import ErrorMessages

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""

CursorIndex = Annotated[int, Field(ge=-1)]
"""Playback cursor position; -1 means no current video."""

PercentFloat = Annotated[float, Field(ge=0.0, le=100.0)]
"""Watched percentage in [0.0, 100.0]."""

DurationSeconds = Annotated[int, Field(ge=0, le=864_000)]
"""Video duration in seconds: 0 … 864 000 (ten days, long live streams)."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

HttpUrlStr = Annotated[str, Field(pattern=r"^https?://")]
"""String that starts with http:// or https://."""


# ── Settings-specific constraints ──────────────────────────────────

PlaylistMaxSize = Annotated[int, Field(ge=1, le=1000)]
"""Sliding window capacity: 1 … 1 000."""

SyncIntervalSeconds = Annotated[int, Field(ge=1, le=86_400)]
"""Reconciliation interval in seconds: 1 … 86 400."""


# ── Read-only containers ────────────────────────────────────────────


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, list | tuple):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


def _to_frozen_mapping(value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(ErrorMessages.INVALID_METADATA.format(type_name=type(value).__name__))
    return _freeze(value)


FrozenMapping = Annotated[
    Mapping[str, Any],
    PlainValidator(_to_frozen_mapping),
    PlainSerializer(_thaw, return_type=dict),
]
"""Mapping stored as a read-only view; nested dicts and lists are frozen too."""
