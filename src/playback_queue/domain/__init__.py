# ruff: noqa: N999
"""
Domain Layer

Contains pure playlist logic:
- shared/: Exceptions, message templates, constrained types and constants
- playlist/: Video entries, the playback cursor and the bounded playlist
"""

from playback_queue.domain.playlist import Playlist, Video, VideoId
from playback_queue.domain.shared.exceptions import DomainError

__all__ = [
    "Playlist",
    "Video",
    "VideoId",
    "DomainError",
]
