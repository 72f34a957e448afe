"""Data models for torrentctl.

Client-facing records (torrents and their files) and the configuration
schema, all validated with pydantic.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class TorrentFile(BaseModel):
    """One file entry in a torrent's content list."""

    index: int = Field(..., ge=0, description="File index as known to the client")
    path: str = Field(..., description="Path relative to the torrent content root")
    size: int = Field(..., ge=0, description="File size in bytes")


class Torrent(BaseModel):
    """A torrent tracked by a BitTorrent client."""

    info_hash: str = Field(..., description="Info hash (hex string)")
    name: str = Field(default="", description="Torrent name")
    save_path: str = Field(default="", description="Save path as seen by the client")
    content_path: str = Field(
        default="",
        description="Content root path (file or top-level folder) as seen by the client",
    )
    size: int = Field(default=0, ge=0, description="Total size in bytes")


class ObservabilityConfig(BaseModel):
    """Logging configuration."""

    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Log level")
    log_file: str | None = Field(None, description="Log file path")


class PartialDownloadConfig(BaseModel):
    """Settings for the partialdownload command."""

    priority_delay: float = Field(
        default=5.0,
        ge=0.0,
        le=600.0,
        description="Seconds to wait between the download and no-download priority calls",
    )


class ClientConfig(BaseModel):
    """A named BitTorrent client definition."""

    type: str = Field(..., description="Client type, e.g. qbittorrent or transmission")
    adapter: str | None = Field(
        None,
        description="Adapter class as 'package.module:ClassName', overrides type lookup",
    )
    url: str | None = Field(None, description="Client API URL")
    username: str | None = Field(None, description="Client API username")
    password: str | None = Field(None, description="Client API password")
    options: dict[str, str] = Field(
        default_factory=dict,
        description="Adapter specific options",
    )


class Config(BaseModel):
    """Main configuration model."""

    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Logging configuration",
    )
    partial_download: PartialDownloadConfig = Field(
        default_factory=PartialDownloadConfig,
        description="Partial download configuration",
    )
    clients: dict[str, ClientConfig] = Field(
        default_factory=dict,
        description="Configured clients keyed by name",
    )
