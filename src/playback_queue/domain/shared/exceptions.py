"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class RemoteSyncError(DomainError):
    """Raised when the remote playlist source cannot be read or written."""

    def __init__(self, operation: str, message: str | None = None) -> None:
        msg = message or f"Remote playlist {operation} failed"
        super().__init__(msg, code="REMOTE_SYNC_ERROR")
        self.operation = operation
