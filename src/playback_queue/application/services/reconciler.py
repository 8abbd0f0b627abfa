"""Keeps the local playlist and the remote copy in step."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from ...domain.shared.exceptions import RemoteSyncError
from ...domain.shared.messages import ErrorMessages, LogTemplates
from .playlist_models import ReconcileResult

if TYPE_CHECKING:
    from ...config.settings import SyncSettings
    from ..interfaces.remote_playlist import RemotePlaylistSource
    from .playlist_service import PlaylistApplicationService

logger = logging.getLogger(__name__)


class PlaylistReconciler:
    """Pulls remote videos into the playlist and pushes local additions out.

    Runs are serialised with a lock; the playlist itself is touched only from
    the event loop that owns it. Remote failures are logged and reported in
    the result, never raised to the caller.

    Pulled videos land after the sync boundary, so a full :meth:`reconcile`
    pushes them back together with the local additions: the remote always
    receives the whole tail past the boundary. The checkpoint only moves the
    boundary to just after the current video.
    """

    def __init__(
        self,
        *,
        playlist_service: PlaylistApplicationService,
        remote: RemotePlaylistSource,
        settings: SyncSettings,
    ) -> None:
        self._service = playlist_service
        self._remote = remote
        self._settings = settings
        self._lock = asyncio.Lock()
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def is_busy(self) -> bool:
        return self._lock.locked()

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            logger.warning(LogTemplates.SYNC_ALREADY_RUNNING)
            return

        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        logger.info(LogTemplates.SYNC_LOOP_STARTED, self._settings.interval_seconds)

    async def stop(self) -> None:
        self._running = False

        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info(LogTemplates.SYNC_LOOP_STOPPED)

    async def _run_loop(self) -> None:
        while self._running:
            await self.reconcile()

            try:
                await asyncio.sleep(self._settings.interval_seconds)
            except asyncio.CancelledError:
                break

    async def reconcile(self) -> ReconcileResult:
        """Pull, push, then checkpoint the playlist."""
        async with self._lock:
            logger.debug(LogTemplates.SYNC_STARTED)
            try:
                pulled = await self._pull()
                pushed = await self._push()
            except RemoteSyncError as e:
                return ReconcileResult(success=False, message=e.message)

            if self._settings.checkpoint_after_push:
                self._service.start_session()

            logger.info(LogTemplates.SYNC_COMPLETED, pulled, pushed)
            return ReconcileResult(success=True, pulled=pulled, pushed=pushed)

    async def pull(self) -> ReconcileResult:
        async with self._lock:
            try:
                pulled = await self._pull()
            except RemoteSyncError as e:
                return ReconcileResult(success=False, message=e.message)
            return ReconcileResult(success=True, pulled=pulled)

    async def push(self) -> ReconcileResult:
        async with self._lock:
            try:
                pushed = await self._push()
            except RemoteSyncError as e:
                return ReconcileResult(success=False, message=e.message)
            return ReconcileResult(success=True, pushed=pushed)

    async def _pull(self) -> int:
        try:
            videos = await self._remote.fetch_items()
        except Exception as e:
            logger.warning(LogTemplates.SYNC_PULL_FAILED, e)
            raise RemoteSyncError("fetch", ErrorMessages.REMOTE_FETCH_FAILED.format(error=e)) from e

        if not videos:
            return 0
        self._service.merge_remote(videos)
        return len(videos)

    async def _push(self) -> int:
        changed = self._service.changed_items()
        if not changed:
            logger.debug(LogTemplates.SYNC_NOTHING_TO_PUSH)
            return 0

        try:
            await self._remote.push_items(changed)
        except Exception as e:
            logger.warning(LogTemplates.SYNC_PUSH_FAILED, e)
            raise RemoteSyncError("push", ErrorMessages.REMOTE_PUSH_FAILED.format(error=e)) from e
        return len(changed)
