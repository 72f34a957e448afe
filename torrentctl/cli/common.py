"""Shared helpers for CLI commands."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable, TypeVar

import click

from torrentctl.cli.verbosity import VerbosityManager
from torrentctl.client.registry import create_client
from torrentctl.config.config import init_config
from torrentctl.utils.exceptions import TorrentCtlError

if TYPE_CHECKING:
    from torrentctl.client.base import ClientAdapter
    from torrentctl.config.config import ConfigManager

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_config_from_context(ctx: click.Context) -> ConfigManager:
    """Load configuration for a command and set up logging.

    The ``--config`` path and ``-v`` count stored on the root group's context
    object are honored. At debug verbosity log lines also show their source.
    """
    obj: dict[str, Any] = ctx.find_root().obj or {}
    try:
        config_manager = init_config(obj.get("config"))
    except TorrentCtlError as e:
        raise click.ClickException(str(e)) from e
    verbosity = VerbosityManager.from_count(obj.get("verbosity", 0))
    config_manager.setup_logging(
        verbosity.get_logging_level(), show_path=verbosity.is_debug()
    )
    return config_manager


def open_client(config_manager: ConfigManager, name: str) -> ClientAdapter:
    """Create a named client, turning configuration errors into CLI errors."""
    try:
        return create_client(name, config_manager)
    except TorrentCtlError as e:
        raise click.ClickException(str(e)) from e


async def close_client(client: ClientAdapter) -> None:
    """Close a client; a failure is logged and never masks the command's result."""
    try:
        await client.close()
    except Exception as e:
        logger.warning("Failed to close client %s: %s", client.name, e)


def run_async(func: Callable[[], Awaitable[T]]) -> T:
    """Run an async command body, mapping every failure to a CLI error."""
    try:
        return asyncio.run(func())
    except click.ClickException:
        raise
    except TorrentCtlError as e:
        raise click.ClickException(str(e)) from e
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        raise click.ClickException(str(e)) from e
