"""
Unit Tests for Dependency Injection Container

Tests for:
- Lazy initialization and caching of the playlist and services
- Settings flowing into the playlist
- Remote source wiring for the reconciler
- Session reset and shutdown
"""

from unittest.mock import AsyncMock

import pytest

from playback_queue.config.container import Container, create_container
from playback_queue.config.settings import PlaylistSettings, Settings, SyncSettings


@pytest.fixture
def container(test_settings):
    return create_container(test_settings)


class TestContainer:
    """Unit tests for Container."""

    def test_create_container(self, test_settings):
        container = create_container(test_settings)
        assert isinstance(container, Container)
        assert container.settings is test_settings

    def test_playlist_is_cached(self, container):
        assert container.playlist is container.playlist

    def test_playlist_uses_settings(self):
        settings = Settings(_env_file=None, playlist=PlaylistSettings(max_size=5))
        container = create_container(settings)
        assert container.playlist.max_size == 5

    def test_service_shares_playlist(self, container):
        assert container.playlist_service.playlist is container.playlist
        assert container.playlist_service is container.playlist_service

    def test_reconciler_requires_remote(self, container):
        with pytest.raises(RuntimeError, match="set_remote_source"):
            _ = container.reconciler

    def test_reconciler_with_remote(self, container):
        container.set_remote_source(AsyncMock())
        assert container.reconciler is container.reconciler

    def test_set_remote_source_rebuilds_reconciler(self, container):
        container.set_remote_source(AsyncMock())
        first = container.reconciler

        container.set_remote_source(AsyncMock())

        assert container.reconciler is not first

    def test_reset_playlist_starts_new_session(self, container, make_video):
        container.playlist_service.open(make_video("A"))
        old = container.playlist

        container.reset_playlist()

        assert container.playlist is not old
        assert len(container.playlist) == 0
        assert container.playlist_service.playlist is container.playlist

    @pytest.mark.asyncio
    async def test_shutdown_stops_loop(self):
        settings = Settings(_env_file=None, sync=SyncSettings(interval_seconds=60))
        container = create_container(settings)
        remote = AsyncMock()
        remote.fetch_items = AsyncMock(return_value=[])
        container.set_remote_source(remote)
        reconciler = container.reconciler
        reconciler.start()

        await container.shutdown()

        assert reconciler.is_running is False
        assert container._reconciler is None
