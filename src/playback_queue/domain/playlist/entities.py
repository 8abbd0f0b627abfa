"""Core domain entities for the playlist bounded context."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from playback_queue.domain.playlist.value_objects import MediaPayload, OptionalVideoIdField
from playback_queue.domain.shared.types import (
    DurationSeconds,
    HttpUrlStr,
    NonNegativeInt,
    PercentFloat,
)


class Video(BaseModel):
    """A single media reference stored in the playlist.

    Identity comes from ``video_id``, falling back to ``playlist_id`` and then
    ``channel_id``. Two instances are equal when they point at the same logical
    item, whatever their content. ``media_item`` and ``next_media_item`` are the
    heavy payloads; they can be dropped without affecting identity.
    """

    model_config = ConfigDict(validate_assignment=True)

    CONTENT_FIELDS: ClassVar[tuple[str, ...]] = (
        "title",
        "second_title",
        "description",
        "thumbnail_url",
        "duration_seconds",
        "percent_watched",
        "start_position_ms",
        "is_live",
        "is_upcoming",
        "is_subscribed",
        "playlist_index",
    )
    PAYLOAD_FIELDS: ClassVar[tuple[str, ...]] = ("media_item", "next_media_item")

    # Identity
    video_id: OptionalVideoIdField = None
    playlist_id: str | None = None
    channel_id: str | None = None

    # Content
    title: str = ""
    second_title: str | None = None
    description: str | None = None
    thumbnail_url: HttpUrlStr | None = None
    duration_seconds: DurationSeconds | None = None
    percent_watched: PercentFloat = 0.0
    start_position_ms: NonNegativeInt = 0
    is_live: bool = False
    is_upcoming: bool = False
    is_subscribed: bool = False
    playlist_index: NonNegativeInt | None = None

    # Heavy payloads
    media_item: MediaPayload | None = None
    next_media_item: MediaPayload | None = None

    @property
    def identity_key(self) -> tuple[str, str] | None:
        if self.video_id is not None:
            return ("video", self.video_id.value)
        if self.playlist_id:
            return ("playlist", self.playlist_id)
        if self.channel_id:
            return ("channel", self.channel_id)
        return None

    @property
    def has_payload(self) -> bool:
        return self.media_item is not None or self.next_media_item is not None

    @staticmethod
    def is_empty(video: Video | None) -> bool:
        """True for None or a video that has nothing to identify it by."""
        return video is None or video.identity_key is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Video):
            return NotImplemented
        key = self.identity_key
        return key is not None and key == other.identity_key

    def __hash__(self) -> int:
        return hash(self.identity_key)

    def __str__(self) -> str:
        if self.title:
            return self.title
        key = self.identity_key
        return key[1] if key else "<empty>"

    def copy(self) -> Video:  # type: ignore[override]
        """Return an independent copy; payloads are frozen and shared."""
        return self.model_copy()

    def sync(self, other: Video | None) -> None:
        """Refresh content from another instance of the same video, in place."""
        if Video.is_empty(other) or other != self:
            return

        for name in self.CONTENT_FIELDS:
            setattr(self, name, getattr(other, name))

        for name in self.PAYLOAD_FIELDS:
            payload = getattr(other, name)
            if payload is not None:
                setattr(self, name, payload)

    def strip_payload(self) -> None:
        """Release the heavy payloads."""
        self.media_item = None
        self.next_media_item = None
