"""Applying a chunk plan to a torrent in a client."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from torrentctl.chunking.planner import ChunkPlan, PlanOptions, order_files, plan_chunks
from torrentctl.client.base import FilePriority
from torrentctl.utils.exceptions import SourceError, TorrentCtlError

if TYPE_CHECKING:
    from torrentctl.client.base import ClientAdapter
    from torrentctl.models import TorrentFile

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY_DELAY = 5.0


async def fetch_torrent_files(client: ClientAdapter, info_hash: str) -> list[TorrentFile]:
    """Fetch the file list of a torrent.

    Raises:
        SourceError: if the client fails to return the file list

    """
    try:
        return await client.get_torrent_contents(info_hash)
    except TorrentCtlError:
        raise
    except Exception as e:
        msg = f"Failed to get client files: {e}"
        raise SourceError(msg, details={"info_hash": info_hash}) from e


async def build_plan(
    client: ClientAdapter,
    info_hash: str,
    options: PlanOptions,
) -> ChunkPlan:
    """Fetch a torrent's files and partition them into chunks."""
    options.validate()
    files = await fetch_torrent_files(client, info_hash)
    ordered = order_files(files, original_order=options.original_order)
    plan = plan_chunks(ordered, options)
    logger.debug(
        "Planned %d chunks for %s (%d files, chunk size %d, strict=%s)",
        plan.chunk_count,
        info_hash,
        plan.file_count,
        options.chunk_size,
        options.strict,
    )
    return plan


async def _set_priority(
    client: ClientAdapter,
    info_hash: str,
    file_indexes: tuple[int, ...],
    priority: FilePriority,
    description: str,
) -> None:
    try:
        await client.set_file_priority(info_hash, list(file_indexes), priority)
    except TorrentCtlError:
        raise
    except Exception as e:
        msg = f"Failed to set {description} files: {e}"
        raise SourceError(msg, details={"info_hash": info_hash}) from e


async def apply_chunk_selection(
    client: ClientAdapter,
    info_hash: str,
    plan: ChunkPlan,
    priority_delay: float = DEFAULT_PRIORITY_DELAY,
) -> None:
    """Mark the selected chunk's files as download and every other file as skip.

    The two priority calls are separated by ``priority_delay`` seconds so the
    client registers the first change before the second arrives. There is no
    rollback: if the second call fails, the first call's effect persists.

    Raises:
        ValidationError: if the plan's chunk index is out of range
        SourceError: if either priority call fails

    """
    plan.require_selected_chunk()

    await _set_priority(
        client, info_hash, plan.download_indexes, FilePriority.DOWNLOAD, "download"
    )
    logger.info(
        "Marked %d files of %s for download", len(plan.download_indexes), info_hash
    )
    if priority_delay > 0:
        await asyncio.sleep(priority_delay)
    await _set_priority(
        client, info_hash, plan.no_download_indexes, FilePriority.SKIP, "no download"
    )
    logger.info(
        "Marked %d files of %s as no download",
        len(plan.no_download_indexes),
        info_hash,
    )
