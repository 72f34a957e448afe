"""BitTorrent client adapters."""

from __future__ import annotations

from torrentctl.client.base import ClientAdapter, FilePriority
from torrentctl.client.registry import (
    ClientTypeRegistry,
    create_client,
    register_client_type,
)

__all__ = [
    "ClientAdapter",
    "ClientTypeRegistry",
    "FilePriority",
    "create_client",
    "register_client_type",
]
