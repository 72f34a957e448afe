"""Exception hierarchy for torrentctl.

Every error raised by torrentctl derives from :class:`TorrentCtlError` so the
CLI can turn any of them into a clean, non-zero exit.
"""

from __future__ import annotations

from typing import Any


class TorrentCtlError(Exception):
    """Base exception for all torrentctl errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize torrentctl error."""
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class ValidationError(TorrentCtlError):
    """Malformed or out-of-range user input."""


class ConfigurationError(ValidationError):
    """Configuration file or client definition errors."""


class ConstraintViolationError(TorrentCtlError):
    """A file list cannot be represented under the requested constraints."""


class SourceError(TorrentCtlError):
    """Failure reported by the torrent client collaborator."""
