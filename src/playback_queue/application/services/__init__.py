"""Application services for the playlist."""

from playback_queue.application.services.playlist_models import (
    NavigationResult,
    PlaylistSnapshot,
    ReconcileResult,
)
from playback_queue.application.services.playlist_service import PlaylistApplicationService
from playback_queue.application.services.reconciler import PlaylistReconciler

__all__ = [
    "PlaylistApplicationService",
    "PlaylistReconciler",
    "NavigationResult",
    "PlaylistSnapshot",
    "ReconcileResult",
]
