"""
Property-based tests for partial download chunk planning.

Tests invariants of the chunk planner using Hypothesis for automatic
test case generation.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from torrentctl.chunking.planner import PlanOptions, order_files, plan_chunks
from torrentctl.models import TorrentFile
from torrentctl.utils.exceptions import ConstraintViolationError

pytestmark = [pytest.mark.property, pytest.mark.chunking]

file_sizes = st.lists(st.integers(min_value=0, max_value=1000), min_size=1, max_size=40)
chunk_sizes = st.integers(min_value=1, max_value=1500)


def _files(sizes: list[int]) -> list[TorrentFile]:
    return [TorrentFile(index=i, path=f"f{i:03d}", size=s) for i, s in enumerate(sizes)]


class TestChunkPlannerProperties:
    """Property-based tests for the chunk planner."""

    @given(file_sizes, chunk_sizes)
    def test_non_strict_partition(self, sizes, chunk_size):
        """Every chunk except the last reaches the chunk size; files are partitioned."""
        files = _files(sizes)
        plan = plan_chunks(files, PlanOptions(chunk_size=chunk_size))

        for chunk in plan.chunks[:-1]:
            assert chunk.size >= chunk_size
        assert all(chunk.file_count >= 1 for chunk in plan.chunks)
        assert sum(c.file_count for c in plan.chunks) == len(files)
        assert sum(c.size for c in plan.chunks) == sum(sizes)
        assert [c.index for c in plan.chunks] == list(range(plan.chunk_count))
        assert sorted(plan.download_indexes + plan.no_download_indexes) == [
            f.index for f in files
        ]

    @given(file_sizes, chunk_sizes)
    def test_strict_bound_or_failure(self, sizes, chunk_size):
        """Strict mode fails iff a file exceeds the chunk size, else all chunks fit."""
        files = _files(sizes)
        too_large = any(s > chunk_size for s in sizes)
        try:
            plan = plan_chunks(files, PlanOptions(chunk_size=chunk_size, strict=True))
        except ConstraintViolationError:
            assert too_large
            return

        assert not too_large
        assert all(chunk.size <= chunk_size for chunk in plan.chunks)
        assert sum(c.file_count for c in plan.chunks) == len(files)

    @given(file_sizes, chunk_sizes, chunk_sizes, st.booleans())
    def test_chunk_count_monotonic(self, sizes, size_a, size_b, strict):
        """A smaller chunk size never yields fewer chunks."""
        small, large = sorted((size_a, size_b))
        if strict and max(sizes) > small:
            return
        files = _files(sizes)

        small_plan = plan_chunks(files, PlanOptions(chunk_size=small, strict=strict))
        large_plan = plan_chunks(files, PlanOptions(chunk_size=large, strict=strict))

        assert small_plan.chunk_count >= large_plan.chunk_count

    @given(file_sizes, chunk_sizes, st.randoms(use_true_random=False))
    def test_order_keeps_totals(self, sizes, chunk_size, rnd):
        """Original vs path order never changes totals."""
        files = _files(sizes)
        rnd.shuffle(files)

        by_path = plan_chunks(order_files(files), PlanOptions(chunk_size=chunk_size))
        original = plan_chunks(
            order_files(files, original_order=True), PlanOptions(chunk_size=chunk_size)
        )

        assert by_path.total_size == original.total_size == sum(sizes)
        assert by_path.file_count == original.file_count == len(files)

    @given(file_sizes, chunk_sizes, st.integers(min_value=0, max_value=50))
    def test_download_set_matches_selected_chunk(self, sizes, chunk_size, chunk_index):
        """The download set is exactly the selected chunk's files."""
        plan = plan_chunks(
            _files(sizes), PlanOptions(chunk_size=chunk_size, chunk_index=chunk_index)
        )

        chunk = plan.selected_chunk
        if chunk is None:
            assert plan.download_indexes == ()
        else:
            assert len(plan.download_indexes) == chunk.file_count
