"""Immutable value objects for the playlist bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator

from playback_queue.domain.shared.messages import ErrorMessages
from playback_queue.domain.shared.types import FrozenMapping, HttpUrlStr, NonEmptyStr


@dataclass(frozen=True)
class VideoId:
    """Typically a YouTube video ID."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError(ErrorMessages.EMPTY_VIDEO_ID)

    def __str__(self) -> str:
        return self.value

    def __hash__(self) -> int:
        return hash(self.value)


def _to_video_id(v: Any) -> Any:
    if v is None or isinstance(v, VideoId):
        return v
    if isinstance(v, str):
        return VideoId(v)
    raise ValueError(ErrorMessages.EMPTY_VIDEO_ID)


# Serializes as plain string, stores as VideoId in the model.
OptionalVideoIdField = Annotated[
    VideoId | None,
    PlainValidator(_to_video_id),
    PlainSerializer(lambda v: v.value if v is not None else None, return_type=str | None),
]


class MediaPayload(BaseModel):
    """Heavy playback metadata fetched for a video (formats, stream URLs, raw info).

    Frozen, with read-only metadata, so an entry and its copies can share
    one payload safely.
    """

    model_config = ConfigDict(frozen=True)

    video_id: NonEmptyStr
    stream_urls: tuple[HttpUrlStr, ...] = ()
    formats: tuple[str, ...] = ()
    storyboard_url: HttpUrlStr | None = None
    raw: FrozenMapping = Field(default_factory=lambda: MappingProxyType({}))

    @property
    def has_streams(self) -> bool:
        return bool(self.stream_urls)


class MutationOutcome(Enum):
    """Result of a playlist mutation.

    Mutations never raise on invalid input; the outcome tells a caller
    that cares whether anything happened.
    """

    APPLIED = "applied"
    REJECTED_EMPTY = "rejected_empty"
    UNCHANGED = "unchanged"

    @property
    def applied(self) -> bool:
        return self is MutationOutcome.APPLIED

    def __bool__(self) -> bool:
        return self.applied
