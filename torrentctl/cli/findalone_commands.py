"""CLI command to find files in save paths that no torrent owns."""

from __future__ import annotations

import os

import click

from torrentctl.cli.common import (
    close_client,
    get_config_from_context,
    open_client,
    run_async,
)
from torrentctl.storage.alone import (
    content_roots,
    find_alone_files,
    parse_save_path_mappings,
)
from torrentctl.utils.exceptions import SourceError, TorrentCtlError, ValidationError


@click.command("findalone")
@click.argument("client_name")
@click.argument("save_paths", nargs=-1, required=True)
@click.option(
    "--map-save-path-prefix",
    "map_save_path_prefixes",
    multiple=True,
    help=(
        "Map save path that torrentctl sees to the one that the BitTorrent client sees. "
        'Format: "original_save_path|client_save_path". E.g. "/root/Downloads|/var/Downloads" '
        'maps "/root/Downloads/..." to "/var/Downloads/...". Can be set multiple times.'
    ),
)
@click.pass_context
def findalone(
    ctx,
    client_name: str,
    save_paths: tuple[str, ...],
    map_save_path_prefixes: tuple[str, ...],
) -> None:
    """Find alone files (no matched torrent exists in client) in save path(s).

    Only the top-level entries of each save path are read; the directories
    are not scanned recursively. Found files and dirs are printed to stdout.
    """
    try:
        mappings = parse_save_path_mappings(map_save_path_prefixes)
    except ValidationError as e:
        raise click.ClickException(str(e)) from e

    config_manager = get_config_from_context(ctx)

    async def _findalone() -> int:
        """Async helper for findalone."""
        client = open_client(config_manager, client_name)
        try:
            try:
                torrents = await client.get_torrents()
            except TorrentCtlError:
                raise
            except Exception as e:
                msg = f"failed to get client torrents: {e}"
                raise SourceError(msg) from e
        finally:
            await close_client(client)

        result = find_alone_files(save_paths, content_roots(torrents, mappings))
        for path in result.alone:
            click.echo(os.path.normpath(path))
        return len(result.errors)

    error_count = run_async(_findalone)
    if error_count > 0:
        raise click.ClickException(f"{error_count} errors")
