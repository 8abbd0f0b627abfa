"""Dependency Injection Container

Owns the session playlist and the services built around it. Components are
created on first access and cached; ``reset_playlist`` ends a playback
session by discarding the playlist and everything that holds it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.interfaces.remote_playlist import RemotePlaylistSource
    from ..application.services.playlist_service import PlaylistApplicationService
    from ..application.services.reconciler import PlaylistReconciler
    from ..domain.playlist.playlist import Playlist
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed.
    """

    settings: Settings
    _remote_source: RemotePlaylistSource | None = None

    _playlist: Playlist | None = None
    _playlist_service: PlaylistApplicationService | None = None
    _reconciler: PlaylistReconciler | None = None

    def set_remote_source(self, remote: RemotePlaylistSource) -> None:
        """Set the remote playlist adapter used by the reconciler."""
        self._remote_source = remote
        self._reconciler = None

    @property
    def remote_source(self) -> RemotePlaylistSource:
        if self._remote_source is None:
            raise RuntimeError(ErrorMessages.REMOTE_SOURCE_NOT_SET)
        return self._remote_source

    # === Domain ===

    @property
    def playlist(self) -> Playlist:
        """Get the session playlist."""
        if self._playlist is None:
            from ..domain.playlist.playlist import Playlist

            self._playlist = Playlist(
                self.settings.playlist.max_size,
                strip_previous_payload=self.settings.playlist.strip_previous_payload,
            )
        return self._playlist

    # === Application Services ===

    @property
    def playlist_service(self) -> PlaylistApplicationService:
        """Get the playlist application service."""
        if self._playlist_service is None:
            from ..application.services.playlist_service import PlaylistApplicationService

            self._playlist_service = PlaylistApplicationService(
                playlist=self.playlist,
                settings=self.settings.playlist,
            )
        return self._playlist_service

    @property
    def reconciler(self) -> PlaylistReconciler:
        """Get the reconciler; requires a remote source."""
        if self._reconciler is None:
            from ..application.services.reconciler import PlaylistReconciler

            self._reconciler = PlaylistReconciler(
                playlist_service=self.playlist_service,
                remote=self.remote_source,
                settings=self.settings.sync,
            )
        return self._reconciler

    # === Lifecycle ===

    def reset_playlist(self) -> None:
        """Discard the session playlist and the services bound to it."""
        self._playlist = None
        self._playlist_service = None
        self._reconciler = None
        logger.info(LogTemplates.CONTAINER_PLAYLIST_RESET)

    async def shutdown(self) -> None:
        """Stop background reconciliation and drop the session."""
        if self._reconciler is not None and self._reconciler.is_running:
            try:
                await self._reconciler.stop()
            except Exception as exc:
                logger.warning("Failed stopping reconciliation loop: %r", exc)

        self.reset_playlist()


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
