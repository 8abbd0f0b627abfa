"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the application
layer and infrastructure adapters.
"""

from playback_queue.application.interfaces.remote_playlist import RemotePlaylistSource

__all__ = [
    "RemotePlaylistSource",
]
