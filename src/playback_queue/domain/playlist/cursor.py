"""Bounds-checked playback cursor."""

from __future__ import annotations

from playback_queue.domain.shared.constants import PlaylistConstants


class PlaybackCursor:
    """Index of the current video in a playlist, or -1 when nothing is current.

    The owner calls :meth:`revalidate` after every structural change so the
    index always stays within ``[-1, size - 1]``.
    """

    __slots__ = ("_index",)

    def __init__(self, index: int = PlaylistConstants.NO_CURRENT) -> None:
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_set(self) -> bool:
        return self._index >= 0

    def reset(self) -> None:
        self._index = PlaylistConstants.NO_CURRENT

    def move_to(self, index: int, size: int) -> None:
        self._index = index
        self.revalidate(size)

    def shift(self, delta: int, size: int) -> None:
        self._index += delta
        self.revalidate(size)

    def revalidate(self, size: int) -> None:
        """Clamp the index into ``[-1, size - 1]``."""
        if self._index >= size:
            self._index = size - 1
        if self._index < PlaylistConstants.NO_CURRENT:
            self._index = PlaylistConstants.NO_CURRENT

    def __int__(self) -> int:
        return self._index

    def __repr__(self) -> str:
        return f"PlaybackCursor(index={self._index})"
