"""Application bootstrap: settings, logging and the dependency container."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from playback_queue.config.container import create_container
from playback_queue.config.settings import get_settings
from playback_queue.utils.logging import setup_logging

if TYPE_CHECKING:
    from playback_queue.application.interfaces.remote_playlist import RemotePlaylistSource
    from playback_queue.config.container import Container
    from playback_queue.config.settings import Settings

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    remote: RemotePlaylistSource | None = None,
) -> Container:
    """Build a container for one playback session."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    container = create_container(settings)
    if remote is not None:
        container.set_remote_source(remote)

    logger.info(
        "Playlist ready (environment=%s, max_size=%d)",
        settings.environment,
        settings.playlist.max_size,
    )
    return container
