"""Port interface for the remote copy of the playlist."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.playlist.entities import Video


class RemotePlaylistSource(ABC):
    """Interface for reading and updating the remote source of truth.

    Implementations raise any exception on transport failure; the reconciler
    wraps it and keeps playback running.
    """

    @abstractmethod
    async def fetch_items(self) -> list["Video"]:
        """Return the videos the remote side currently knows about, in order."""
        ...

    @abstractmethod
    async def push_items(self, items: list["Video"]) -> None:
        """Send locally added videos to the remote side."""
        ...
