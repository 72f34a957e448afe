"""Partial download: chunk planning and selection."""

from __future__ import annotations

from torrentctl.chunking.download import (
    apply_chunk_selection,
    build_plan,
    fetch_torrent_files,
)
from torrentctl.chunking.planner import (
    Chunk,
    ChunkPlan,
    PlanOptions,
    order_files,
    plan_chunks,
)

__all__ = [
    "Chunk",
    "ChunkPlan",
    "PlanOptions",
    "apply_chunk_selection",
    "build_plan",
    "fetch_torrent_files",
    "order_files",
    "plan_chunks",
]
