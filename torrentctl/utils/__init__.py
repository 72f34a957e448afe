"""Shared utilities: errors, logging and size units."""

from __future__ import annotations

from torrentctl.utils.exceptions import (
    ConfigurationError,
    ConstraintViolationError,
    SourceError,
    TorrentCtlError,
    ValidationError,
)
from torrentctl.utils.units import format_size, parse_size

__all__ = [
    "ConfigurationError",
    "ConstraintViolationError",
    "SourceError",
    "TorrentCtlError",
    "ValidationError",
    "format_size",
    "parse_size",
]
