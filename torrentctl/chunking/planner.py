"""Partial-download chunk planning.

Splits the files of one torrent into contiguous, size-bounded chunks so a
large torrent can be downloaded one chunk at a time on a machine with
limited disk space.

Without ``strict``, a chunk is closed once its size reaches the chunk size,
so every chunk except the last is at least ``chunk_size`` bytes and there may
be fewer chunks than expected. With ``strict``, a chunk is closed before a
file would push it over the chunk size, so every chunk is at most
``chunk_size`` bytes; a single file larger than the chunk size makes the
torrent impossible to split and fails the whole plan.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from torrentctl.models import TorrentFile
from torrentctl.utils.exceptions import ConstraintViolationError, ValidationError
from torrentctl.utils.units import format_size


@dataclass(frozen=True)
class Chunk:
    """A contiguous run of a torrent's files."""

    index: int
    file_count: int
    size: int


@dataclass(frozen=True)
class PlanOptions:
    """Options of a chunk plan.

    Args:
        chunk_size: Target chunk size in bytes, must be positive
        chunk_index: Index of the chunk to download (0-indexed)
        strict: Guarantee every chunk is <= chunk_size
        original_order: Keep the client's file order instead of sorting by path

    """

    chunk_size: int
    chunk_index: int = 0
    strict: bool = False
    original_order: bool = False

    def validate(self) -> None:
        """Check the options that can be checked before partitioning.

        Raises:
            ValidationError: on a non-positive chunk size or negative chunk index

        """
        if self.chunk_size <= 0:
            msg = f"Invalid chunk size {self.chunk_size}"
            raise ValidationError(msg)
        if self.chunk_index < 0:
            msg = f"Invalid chunk index {self.chunk_index}"
            raise ValidationError(msg)


@dataclass(frozen=True)
class ChunkPlan:
    """Result of partitioning a torrent's files into chunks."""

    options: PlanOptions
    chunks: tuple[Chunk, ...]
    download_indexes: tuple[int, ...]
    no_download_indexes: tuple[int, ...]
    total_size: int
    file_count: int

    @property
    def chunk_count(self) -> int:
        """Number of chunks."""
        return len(self.chunks)

    @property
    def selected_chunk(self) -> Chunk | None:
        """The chunk selected by ``options.chunk_index``, None if out of range."""
        if 0 <= self.options.chunk_index < len(self.chunks):
            return self.chunks[self.options.chunk_index]
        return None

    def require_selected_chunk(self) -> Chunk:
        """Return the selected chunk.

        Raises:
            ValidationError: if the chunk index is not below the chunk count

        """
        chunk = self.selected_chunk
        if chunk is None:
            msg = (
                f"Invalid chunk index {self.options.chunk_index}. "
                f"Torrent has {self.chunk_count} chunks"
            )
            raise ValidationError(
                msg,
                details={
                    "chunk_index": self.options.chunk_index,
                    "chunk_count": self.chunk_count,
                },
            )
        return chunk


def order_files(
    files: Iterable[TorrentFile],
    original_order: bool = False,
) -> list[TorrentFile]:
    """Order files for chunking: client order, or ascending path order."""
    if original_order:
        return list(files)
    return sorted(files, key=lambda f: f.path)


def plan_chunks(files: Sequence[TorrentFile], options: PlanOptions) -> ChunkPlan:
    """Partition an ordered file list into chunks.

    Files are taken in the given order (see :func:`order_files`); the plan
    classifies every file index as download (member of the chunk selected by
    ``options.chunk_index``) or no-download.

    The chunk index is not checked against the chunk count here, since the
    count is only known after partitioning and report mode wants the full
    table regardless; use :meth:`ChunkPlan.require_selected_chunk`.

    Raises:
        ValidationError: on invalid options or an empty file list
        ConstraintViolationError: in strict mode, if a file is larger than
            the chunk size

    """
    options.validate()
    if not files:
        msg = "Torrent has no files"
        raise ValidationError(msg)

    chunk_size = options.chunk_size
    chunks: list[Chunk] = []
    download_indexes: list[int] = []
    no_download_indexes: list[int] = []
    total_size = 0

    current_index = 0
    current_size = 0
    current_count = 0
    for file in files:
        total_size += file.size
        if options.strict and file.size > chunk_size:
            msg = (
                f"Torrent can NOT be strictly split to {format_size(chunk_size)} chunks: "
                f"file {file.path} is too large: {format_size(file.size)}"
            )
            raise ConstraintViolationError(
                msg,
                details={"path": file.path, "size": file.size, "chunk_size": chunk_size},
            )
        if current_count > 0 and (
            current_size >= chunk_size
            or (options.strict and current_size + file.size > chunk_size)
        ):
            chunks.append(Chunk(current_index, current_count, current_size))
            current_index += 1
            current_size = 0
            current_count = 0
        current_size += file.size
        current_count += 1
        if current_index == options.chunk_index:
            download_indexes.append(file.index)
        else:
            no_download_indexes.append(file.index)
    chunks.append(Chunk(current_index, current_count, current_size))

    return ChunkPlan(
        options=options,
        chunks=tuple(chunks),
        download_indexes=tuple(download_indexes),
        no_download_indexes=tuple(no_download_indexes),
        total_size=total_size,
        file_count=len(files),
    )
