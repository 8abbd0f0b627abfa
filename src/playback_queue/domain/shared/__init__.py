"""
Shared Domain Kernel

Contains exceptions, message templates and constants shared by all layers.
"""

from playback_queue.domain.shared.exceptions import (
    DomainError,
    RemoteSyncError,
)

__all__ = [
    "DomainError",
    "RemoteSyncError",
]
