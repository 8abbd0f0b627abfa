"""DTOs for the playlist application services."""

from __future__ import annotations

from pydantic import BaseModel

from ...domain.playlist.entities import Video
from ...domain.shared.types import CursorIndex, NonNegativeInt


class NavigationResult(BaseModel):
    success: bool
    video: Video | None = None
    index: CursorIndex = -1
    dropped: NonNegativeInt = 0
    message: str = ""


class PlaylistSnapshot(BaseModel):
    """Point-in-time view of the playlist for the playback surface."""

    current: Video | None
    previous: Video | None
    next: Video | None
    entries: list[Video]
    changed: list[Video]
    current_index: CursorIndex
    sync_boundary: int

    @property
    def size(self) -> int:
        return len(self.entries)

    @property
    def has_next(self) -> bool:
        return self.next is not None

    @property
    def has_previous(self) -> bool:
        return self.previous is not None


class ReconcileResult(BaseModel):
    success: bool
    pulled: NonNegativeInt = 0
    pushed: NonNegativeInt = 0
    message: str = ""
