"""Playlist Application Service - playback-controller facing use cases."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ...domain.playlist.entities import Video
from ...domain.playlist.value_objects import MutationOutcome
from ...domain.shared.messages import LogTemplates
from .playlist_models import NavigationResult, PlaylistSnapshot

if TYPE_CHECKING:
    from ...config.settings import PlaylistSettings
    from ...domain.playlist.playlist import Playlist

logger = logging.getLogger(__name__)


class PlaylistApplicationService:
    """Opens, steps through and edits the session playlist."""

    def __init__(self, *, playlist: Playlist, settings: PlaylistSettings) -> None:
        self._playlist = playlist
        self._settings = settings

    @property
    def playlist(self) -> Playlist:
        return self._playlist

    def open(self, video: Video | None) -> NavigationResult:
        """Open a video picked outside the queue (browser, suggestions).

        Picking something new mid-queue discards the upcoming branch first.
        """
        if Video.is_empty(video):
            return NavigationResult(success=False, message="Nothing to open")

        playlist = self._playlist
        dropped = 0
        if self._settings.truncate_on_open and video != playlist.get_current():
            dropped = playlist.remove_all_after_current()
            if dropped:
                logger.debug(LogTemplates.PLAYLIST_FUTURE_DROPPED, dropped, playlist.current_index)

        playlist.set_current(video)
        logger.info(LogTemplates.PLAYLIST_CURRENT_SET, video, playlist.current_index)

        return NavigationResult(
            success=True,
            video=playlist.get_current(),
            index=playlist.current_index,
            dropped=dropped,
            message=f"Now playing: {video}",
        )

    def play_next(self) -> NavigationResult:
        return self._step(self._playlist.get_next(), "next")

    def play_previous(self) -> NavigationResult:
        return self._step(self._playlist.get_previous(), "previous")

    def _step(self, target: Video | None, direction: str) -> NavigationResult:
        if target is None:
            logger.debug(LogTemplates.NAVIGATION_END_REACHED, direction)
            return NavigationResult(
                success=False,
                index=self._playlist.current_index,
                message=f"No {direction} video",
            )

        self._playlist.set_current(target)
        logger.info(LogTemplates.PLAYLIST_CURRENT_SET, target, self._playlist.current_index)
        return NavigationResult(
            success=True,
            video=self._playlist.get_current(),
            index=self._playlist.current_index,
            message=f"Now playing: {target}",
        )

    def enqueue(self, video: Video | None) -> MutationOutcome:
        outcome = self._playlist.add(video)
        if outcome is MutationOutcome.REJECTED_EMPTY:
            logger.debug(LogTemplates.PLAYLIST_ADD_REJECTED)
        else:
            logger.debug(
                LogTemplates.PLAYLIST_ADDED,
                video,
                len(self._playlist),
                self._playlist.current_index,
            )
        return outcome

    def dequeue(self, video: Video | None) -> MutationOutcome:
        outcome = self._playlist.remove(video)
        if outcome.applied:
            logger.debug(
                LogTemplates.PLAYLIST_REMOVED,
                video,
                len(self._playlist),
                self._playlist.current_index,
            )
        else:
            logger.debug(LogTemplates.PLAYLIST_REMOVE_SKIPPED, video, outcome.value)
        return outcome

    def refresh(self, video: Video | None) -> MutationOutcome:
        """Push fresh content of a video into its stored copy."""
        outcome = self._playlist.sync(video)
        if outcome.applied:
            logger.debug(LogTemplates.PLAYLIST_REFRESHED, video)
        return outcome

    def start_session(self) -> None:
        self._playlist.on_new_session()
        logger.info(LogTemplates.PLAYLIST_SESSION_STARTED, self._playlist.sync_boundary)

    def clear(self) -> None:
        dropped = len(self._playlist)
        self._playlist.clear()
        self._playlist.on_new_session()
        logger.info(LogTemplates.PLAYLIST_CLEARED, dropped)

    # === Reconciliation boundary ===

    def merge_remote(self, videos: Iterable[Video | None]) -> MutationOutcome:
        videos = list(videos)
        outcome = self._playlist.add_all(videos)
        if outcome.applied:
            logger.info(LogTemplates.PLAYLIST_MERGED, len(videos), len(self._playlist))
        return outcome

    def changed_items(self) -> list[Video]:
        return list(self._playlist.get_changed_items())

    def snapshot(self) -> PlaylistSnapshot:
        playlist = self._playlist
        return PlaylistSnapshot(
            current=playlist.get_current(),
            previous=playlist.get_previous(),
            next=playlist.get_next(),
            entries=list(playlist.get_all()),
            changed=list(playlist.get_changed_items()),
            current_index=playlist.current_index,
            sync_boundary=playlist.sync_boundary,
        )
