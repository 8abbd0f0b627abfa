"""
Playlist Bounded Context

Domain logic for the bounded playback queue: videos, cursor and playlist.
"""

from playback_queue.domain.playlist.cursor import PlaybackCursor
from playback_queue.domain.playlist.entities import Video
from playback_queue.domain.playlist.playlist import Playlist
from playback_queue.domain.playlist.value_objects import MediaPayload, MutationOutcome, VideoId

__all__ = [
    # Entities
    "Video",
    "Playlist",
    # Value Objects
    "VideoId",
    "MediaPayload",
    "MutationOutcome",
    "PlaybackCursor",
]
