"""Exceptions raised by file sources and scan stores."""

from __future__ import annotations

from skanzer.exceptions.base import SkanzerError


class FetchError(SkanzerError):
    """Raised when a skill file cannot be retrieved from its source."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to fetch file {path}: {reason}")
        self.path = path
        self.reason = reason


class PersistenceError(SkanzerError):
    """Raised when a scan store rejects or fails to save a record."""
