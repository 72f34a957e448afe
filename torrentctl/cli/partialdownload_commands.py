"""CLI command for partially downloading a large torrent chunk by chunk."""

from __future__ import annotations

import click
from rich.table import Table

from torrentctl.chunking.download import apply_chunk_selection, build_plan
from torrentctl.chunking.planner import ChunkPlan, PlanOptions
from torrentctl.cli.common import (
    close_client,
    get_config_from_context,
    open_client,
    run_async,
)
from torrentctl.cli.console import create_console
from torrentctl.utils.exceptions import ValidationError
from torrentctl.utils.logging_config import LoggingContext
from torrentctl.utils.units import format_size, parse_size


def _print_report(plan: ChunkPlan) -> None:
    console = create_console()
    console.print(
        f"Torrent Size: {format_size(plan.total_size)} ({plan.file_count}) / "
        f"Chunk Size: {format_size(plan.options.chunk_size)}; "
        f"All {plan.chunk_count} Chunks:",
        highlight=False,
    )
    table = Table(box=None, show_edge=False)
    table.add_column("Index", justify="right", style="cyan")
    table.add_column("Files", justify="right", style="green")
    table.add_column("Size", justify="right", style="magenta")
    for chunk in plan.chunks:
        table.add_row(str(chunk.index), str(chunk.file_count), format_size(chunk.size))
    console.print(table)


@click.command("partialdownload")
@click.argument("client_name")
@click.argument("info_hash")
@click.option(
    "--chunk-size",
    "chunk_size_str",
    required=True,
    help="Set the split chunk size string. eg. 500GiB",
)
@click.option(
    "--chunk-index",
    type=int,
    default=0,
    show_default=True,
    help="Set the split chunk index (0-indexed) to download",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Set strict mode that the size of every chunk MUST be strictly <= chunk-size",
)
@click.option(
    "--original-order",
    is_flag=True,
    help="Split torrent files to chunks by their original order instead of path order",
)
@click.option("--all", "-a", "show_all", is_flag=True, help="Show full chunks info and exit")
@click.pass_context
def partialdownload(
    ctx,
    client_name: str,
    info_hash: str,
    chunk_size_str: str,
    chunk_index: int,
    strict: bool,
    original_order: bool,
    show_all: bool,
) -> None:
    """Partially download a (large) torrent in client.

    Add the torrent to the client in paused state before running this
    command, then start it manually afterwards.

    \b
    # View chunks info of the torrent
    torrentctl partialdownload local e447d424dd0e6fba7bf9494008111f3bbb1f56a9 --chunk-size 500GiB -a
    # Download the first (0-indexed) chunk (mark files of other chunks as no-download)
    torrentctl partialdownload local e447d424dd0e6fba7bf9494008111f3bbb1f56a9 --chunk-size 500GiB --chunk-index 0

    Without --strict, the size of each chunk may be larger than the chunk
    size and there may be fewer chunks than expected. With --strict, every
    chunk is <= chunk size and there may be more chunks than expected; a
    single file larger than the chunk size makes the command fail.
    """
    try:
        options = PlanOptions(
            chunk_size=parse_size(chunk_size_str),
            chunk_index=chunk_index,
            strict=strict,
            original_order=original_order,
        )
        options.validate()
    except ValidationError as e:
        raise click.ClickException(str(e)) from e

    config_manager = get_config_from_context(ctx)
    priority_delay = config_manager.config.partial_download.priority_delay

    async def _partialdownload() -> None:
        """Async helper for partialdownload."""
        client = open_client(config_manager, client_name)
        try:
            plan = await build_plan(client, info_hash, options)
            if show_all:
                _print_report(plan)
                return
            chunk = plan.require_selected_chunk()
            with LoggingContext("partial_download", info_hash=info_hash):
                await apply_chunk_selection(client, info_hash, plan, priority_delay)
            click.echo(
                f"Torrent Size: {format_size(plan.total_size)} ({plan.file_count}) / "
                f"Chunks: {plan.chunk_count}; DownloadChunkIndex: {chunk.index}; "
                f"DownloadChunkSize: {format_size(chunk.size)} ({chunk.file_count})"
            )
        finally:
            await close_client(client)

    run_async(_partialdownload)
