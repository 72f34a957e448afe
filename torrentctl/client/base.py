"""Client adapter interface.

A client adapter is the only thing torrentctl knows about a BitTorrent
client. Commands depend on :class:`ClientAdapter` and never on a concrete
client protocol.

Note: All info_hash parameters use hex strings (e.g., "a1b2c3..."), not bytes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from torrentctl.models import ClientConfig, Torrent, TorrentFile


class FilePriority(IntEnum):
    """File download priority levels understood by every adapter."""

    SKIP = 0
    DOWNLOAD = 1


class ClientAdapter(ABC):
    """Abstract interface for BitTorrent client adapters."""

    def __init__(self, name: str, config: ClientConfig):
        """Initialize client adapter.

        Args:
            name: Client name from the configuration
            config: Client definition

        """
        self._name = name
        self.config = config

    @property
    def name(self) -> str:
        """Client name from the configuration."""
        return self._name

    @property
    def client_type(self) -> str:
        """Client type, e.g. ``qbittorrent``."""
        return self.config.type

    @abstractmethod
    async def get_torrents(self) -> list[Torrent]:
        """List all torrents known to the client."""

    @abstractmethod
    async def get_torrent_contents(self, info_hash: str) -> list[TorrentFile]:
        """Get the complete, current file list of a torrent.

        Args:
            info_hash: Torrent info hash (hex string)

        Returns:
            Files in the client's native order

        """

    @abstractmethod
    async def set_file_priority(
        self,
        info_hash: str,
        file_indexes: Iterable[int],
        priority: FilePriority,
    ) -> None:
        """Set the priority of exactly the given files of a torrent.

        Args:
            info_hash: Torrent info hash (hex string)
            file_indexes: Client file indexes
            priority: New priority

        """

    @abstractmethod
    async def get_config(self, name: str) -> str:
        """Get a client configuration value as a string."""

    @abstractmethod
    async def set_config(self, name: str, value: str) -> None:
        """Set a client configuration value."""

    async def close(self) -> None:  # noqa: B027
        """Release client resources."""
