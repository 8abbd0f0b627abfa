"""Tests for the application bootstrap."""

import logging
from unittest.mock import AsyncMock, patch

import pytest

from playback_queue.config.container import Container
from playback_queue.config.settings import PlaylistSettings, Settings
from playback_queue.main import create_app


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCreateApp:
    """Unit tests for create_app."""

    def test_builds_container_from_settings(self, restore_root):
        settings = Settings(
            _env_file=None, log_level="WARNING", playlist=PlaylistSettings(max_size=8)
        )

        container = create_app(settings)

        assert isinstance(container, Container)
        assert container.playlist.max_size == 8
        assert restore_root.level == logging.WARNING

    def test_wires_remote_source(self, restore_root, test_settings):
        remote = AsyncMock()

        container = create_app(test_settings, remote=remote)

        assert container.remote_source is remote

    def test_defaults_to_cached_settings(self, restore_root, test_settings):
        with patch("playback_queue.main.get_settings", return_value=test_settings) as mock_get:
            container = create_app()

        mock_get.assert_called_once()
        assert container.settings is test_settings
