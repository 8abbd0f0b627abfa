import pytest

# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def make_video():
    """Factory for videos identified by a short id."""
    from playback_queue.domain.playlist.entities import Video

    def _make(video_id: str, title: str | None = None, **fields) -> Video:
        return Video(video_id=video_id, title=title or f"Video {video_id}", **fields)

    return _make


@pytest.fixture
def make_payload():
    """Factory for heavy media payloads."""
    from playback_queue.domain.playlist.value_objects import MediaPayload

    def _make(video_id: str) -> MediaPayload:
        return MediaPayload(
            video_id=video_id,
            stream_urls=(f"https://stream.example/{video_id}/720p",),
            formats=("720p", "1080p"),
            raw={"extractor": "youtube", "tags": ["music"]},
        )

    return _make


@pytest.fixture
def empty_video():
    """A video with nothing to identify it by."""
    from playback_queue.domain.playlist.entities import Video

    return Video(title="No identity")


@pytest.fixture
def playlist():
    """A fresh playlist with default capacity."""
    from playback_queue.domain.playlist.playlist import Playlist

    return Playlist()


@pytest.fixture
def filled_playlist(playlist, make_video):
    """Playlist holding A, B, C with A current."""
    for video_id in ("A", "B", "C"):
        playlist.add(make_video(video_id))
    playlist.set_current(make_video("A"))
    return playlist


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def test_settings():
    """Settings with defaults, independent of the environment."""
    from playback_queue.config.settings import Settings

    return Settings(_env_file=None, environment="test")


@pytest.fixture
def playlist_settings():
    from playback_queue.config.settings import PlaylistSettings

    return PlaylistSettings()


@pytest.fixture
def sync_settings():
    from playback_queue.config.settings import SyncSettings

    return SyncSettings(interval_seconds=1)
