"""Bounded playlist with a playback cursor and a sync boundary."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import ClassVar

from playback_queue.domain.playlist.cursor import PlaybackCursor
from playback_queue.domain.playlist.entities import Video
from playback_queue.domain.playlist.value_objects import MutationOutcome
from playback_queue.domain.shared.constants import PlaylistConstants


class Playlist:
    """Ordered, deduplicated list of videos with a current position.

    Every stored video is a private copy of what the caller passed in. The
    list is a sliding window that keeps only the most recent ``max_size``
    videos. ``sync_boundary`` marks the first video added since the last
    reconciliation checkpoint; when it falls outside the list, the whole list
    counts as changed.

    Invalid input (``None`` or a video without identity) is ignored. Mutators
    report what happened through :class:`MutationOutcome` and never raise.
    """

    MAX_SIZE: ClassVar[int] = PlaylistConstants.MAX_SIZE

    def __init__(
        self,
        max_size: int | None = None,
        *,
        strip_previous_payload: bool = True,
    ) -> None:
        self._max_size = self.MAX_SIZE if max_size is None else max_size
        self._strip_previous_payload = strip_previous_payload
        self._entries: list[Video] = []
        self._cursor = PlaybackCursor()
        self._sync_boundary = 0

    # === Read-only state ===

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def current_index(self) -> int:
        return self._cursor.index

    @property
    def sync_boundary(self) -> int:
        return self._sync_boundary

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Video]:
        return iter(tuple(self._entries))

    def __contains__(self, video: object) -> bool:
        return isinstance(video, Video) and self.contains(video)

    def __repr__(self) -> str:
        return (
            f"Playlist(size={len(self._entries)}, cursor={self._cursor.index}, "
            f"sync_boundary={self._sync_boundary})"
        )

    def index_of(self, video: Video | None) -> int:
        """Return the index of the stored copy of ``video``, or -1."""
        if Video.is_empty(video):
            return -1
        try:
            return self._entries.index(video)
        except ValueError:
            return -1

    # === Mutations ===

    def clear(self) -> None:
        self._entries.clear()
        self._cursor.reset()

    def add_all(self, videos: Iterable[Video | None]) -> MutationOutcome:
        """Merge remotely known videos: drop stored duplicates, append copies in order."""
        batch: list[Video] = []
        seen: set[tuple[str, str]] = set()
        for video in videos:
            key = video.identity_key if video is not None else None
            if key is None or key in seen:
                continue
            seen.add(key)
            batch.append(video)

        if not batch:
            return MutationOutcome.UNCHANGED

        self._entries = [entry for entry in self._entries if entry.identity_key not in seen]
        self._entries.extend(video.copy() for video in batch)
        self._cursor.revalidate(len(self._entries))
        self._trim()
        return MutationOutcome.APPLIED

    def add(self, video: Video | None) -> MutationOutcome:
        """Append a video to the end of the playlist.

        Re-adding the current video refreshes it in place instead. A video
        already present elsewhere is moved to the tail.
        """
        if Video.is_empty(video):
            return MutationOutcome.REJECTED_EMPTY

        current = self.get_current()

        if current is not None and video == current:
            self._replace(current, video)
            self._sync_boundary -= 1
            return MutationOutcome.APPLIED

        was_last_element = bool(self._entries) and video == self._entries[-1]

        self.remove(video)

        self._entries.append(video.copy())

        if was_last_element:
            self._cursor.shift(1, len(self._entries))

        self._trim()
        self._strip_previous()
        return MutationOutcome.APPLIED

    def remove(self, video: Video | None) -> MutationOutcome:
        """Remove a video unless it is the current one."""
        if Video.is_empty(video):
            return MutationOutcome.REJECTED_EMPTY

        if video == self.get_current():
            return MutationOutcome.UNCHANGED

        index = self.index_of(video)
        if index < 0:
            return MutationOutcome.UNCHANGED

        del self._entries[index]

        if index < self._cursor.index:
            self._cursor.shift(-1, len(self._entries))
            self._sync_boundary -= 1

        self._cursor.revalidate(len(self._entries))
        return MutationOutcome.APPLIED

    def set_current(self, video: Video | None) -> MutationOutcome:
        """Make ``video`` current, appending it first when it is not stored yet."""
        if Video.is_empty(video):
            return MutationOutcome.REJECTED_EMPTY

        position = self.index_of(video)

        if position >= 0:
            if position == self._cursor.index:
                return MutationOutcome.UNCHANGED
            self._cursor.move_to(position, len(self._entries))
        else:
            self.add(video)
            self._cursor.move_to(len(self._entries) - 1, len(self._entries))

        return MutationOutcome.APPLIED

    def remove_all_after_current(self) -> int:
        """Drop every video after the current one and return how many were dropped."""
        from_index = self._cursor.index + 1
        if 0 < from_index < len(self._entries):
            dropped = len(self._entries) - from_index
            del self._entries[from_index:]
            self._cursor.revalidate(len(self._entries))
            return dropped
        return 0

    def on_new_session(self) -> None:
        """Checkpoint: everything up to the current video is known remotely."""
        self._sync_boundary = self._cursor.index + 1

    def sync(self, origin: Video | None) -> MutationOutcome:
        """Refresh the stored copy equal to ``origin`` without moving it."""
        if Video.is_empty(origin):
            return MutationOutcome.REJECTED_EMPTY

        for video in self._entries:
            if video == origin:
                video.sync(origin)
                return MutationOutcome.APPLIED

        return MutationOutcome.UNCHANGED

    # === Lookups ===

    def contains(self, video: Video | None) -> bool:
        if Video.is_empty(video):
            return False
        return video in self._entries

    def get_next(self) -> Video | None:
        """Peek at the video after the current one; the cursor does not move."""
        index = self._cursor.index
        if index >= 0 and index + 1 < len(self._entries):
            return self._entries[index + 1]
        return None

    def get_previous(self) -> Video | None:
        """Peek at the video before the current one; the cursor does not move."""
        index = self._cursor.index
        if index - 1 >= 0:
            return self._entries[index - 1]
        return None

    def get_current(self) -> Video | None:
        index = self._cursor.index
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def get_all(self) -> tuple[Video, ...]:
        return tuple(self._entries)

    def get_changed_items(self) -> tuple[Video, ...]:
        """Videos added since the last checkpoint, or everything when there is none."""
        size = len(self._entries)
        if self._sync_boundary < 0 or self._sync_boundary >= size:
            return self.get_all()
        return tuple(self._entries[self._sync_boundary:size])

    # === Internal helpers ===

    def _trim(self) -> None:
        """Keep only the newest ``max_size`` videos."""
        overflow = len(self._entries) - self._max_size
        if overflow > 0:
            del self._entries[:overflow]
            self._cursor.shift(-overflow, len(self._entries))

    def _strip_previous(self) -> None:
        """Drop heavy payloads of the video just before the current one."""
        if not self._strip_previous_payload:
            return
        previous = self._cursor.index - 1
        if 0 <= previous < len(self._entries):
            self._entries[previous].strip_payload()

    def _replace(self, origin: Video, new_item: Video) -> None:
        index = self.index_of(origin)
        if index >= 0:
            self._entries[index] = new_item.copy()
