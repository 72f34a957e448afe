"""Configuration management for torrentctl.

Configuration is loaded hierarchically: defaults -> TOML file -> environment.
The file holds logging settings, partial-download settings and the named
client definitions used by every command::

    [observability]
    log_level = "INFO"

    [partial_download]
    priority_delay = 5.0

    [clients.local]
    type = "qbittorrent"
    url = "http://localhost:8080"
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import toml

from torrentctl.models import ClientConfig, Config
from torrentctl.utils.exceptions import ConfigurationError
from torrentctl.utils.logging_config import setup_logging

CONFIG_FILENAME = "torrentctl.toml"

ENV_MAPPINGS: dict[str, str] = {
    "TORRENTCTL_LOG_LEVEL": "observability.log_level",
    "TORRENTCTL_LOG_FILE": "observability.log_file",
    "TORRENTCTL_PRIORITY_DELAY": "partial_download.priority_delay",
}

# Global configuration instance
_config_manager: ConfigManager | None = None


def _set_nested(data: dict[str, Any], path: str, value: Any) -> None:
    ref = data
    parts = path.split(".")
    for part in parts[:-1]:
        ref = ref.setdefault(part, {})
    ref[parts[-1]] = value


class ConfigManager:
    """Manages configuration loading and validation."""

    def __init__(self, config_file: str | Path | None = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to TOML config file. If None, searches for torrentctl.toml

        """
        self.config_file = self._find_config_file(config_file)
        self.config = self._load_config()

    def _find_config_file(
        self,
        config_file: str | Path | None,
    ) -> Path | None:
        """Find configuration file in standard locations."""
        if config_file:
            return Path(config_file)

        search_paths = [
            Path.cwd() / CONFIG_FILENAME,
            Path.home() / ".config" / "torrentctl" / CONFIG_FILENAME,
            Path.home() / f".{CONFIG_FILENAME}",
        ]

        for path in search_paths:
            if path.exists():
                return path

        return None

    def _load_config(self) -> Config:
        """Load configuration from file and environment."""
        config_data: dict[str, Any] = {}

        if self.config_file and self.config_file.exists():
            try:
                with open(self.config_file, encoding="utf-8") as f:
                    config_data.update(toml.load(f))
            except (OSError, toml.TomlDecodeError) as e:
                logging.getLogger(__name__).warning(
                    "Failed to load config file %s: %s", self.config_file, e
                )

        config_data = self._merge_config(config_data, self._get_env_config())

        try:
            return Config(**config_data)
        except Exception as e:
            msg = f"Invalid configuration: {e}"
            raise ConfigurationError(msg) from e

    def _get_env_config(self) -> dict[str, Any]:
        """Get configuration from environment variables."""
        env_config: dict[str, Any] = {}
        for env_name, cfg_path in ENV_MAPPINGS.items():
            raw = os.getenv(env_name)
            if raw is None:
                continue
            value: Any = raw
            if cfg_path == "observability.log_level":
                value = raw.upper()
            _set_nested(env_config, cfg_path, value)
        return env_config

    def _merge_config(
        self,
        base: dict[str, Any],
        override: dict[str, Any],
    ) -> dict[str, Any]:
        """Merge configuration dictionaries recursively."""
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value

        return result

    def get_client_config(self, name: str) -> ClientConfig:
        """Get the definition of a named client.

        Raises:
            ConfigurationError: if no client with that name is configured

        """
        client_config = self.config.clients.get(name)
        if client_config is None:
            msg = f"Client not found in configuration: {name}"
            raise ConfigurationError(
                msg, details={"configured": sorted(self.config.clients)}
            )
        return client_config

    def setup_logging(
        self,
        level_override: int | None = None,
        show_path: bool = False,
    ) -> None:
        """Set up logging configuration."""
        setup_logging(self.config.observability, level_override, show_path)


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager.config


def init_config(config_file: str | Path | None = None) -> ConfigManager:
    """Initialize the global configuration manager."""
    global _config_manager
    _config_manager = ConfigManager(config_file)
    return _config_manager


def set_config(new_config: Config) -> None:
    """Replace the global configuration at runtime."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager(None)
    _config_manager.config = new_config
