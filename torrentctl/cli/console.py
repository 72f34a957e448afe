"""Console utilities for Rich output."""

from __future__ import annotations

import sys

from rich.console import Console


def create_console() -> Console:
    """Create a Rich Console writing to stdout."""
    return Console(
        file=sys.stdout,
        force_terminal=None,
        legacy_windows=False,
        safe_box=True,
    )

