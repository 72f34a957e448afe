"""Rich logging integration for torrentctl.

Console logs go to stderr through a RichHandler so stdout stays reserved for
command output (paths, values, tables) that scripts may consume.
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler


def create_rich_handler(
    console: Console | None = None,
    level: int | str = logging.INFO,
    show_path: bool = False,
    rich_tracebacks: bool = True,
) -> logging.Handler:
    """Create a RichHandler writing to stderr.

    Markup is disabled: log messages carry torrent names and file paths,
    which may contain square brackets.

    Args:
        console: Optional Rich Console instance
        level: Log level
        show_path: Whether to show file paths in log output
        rich_tracebacks: Whether to use rich tracebacks

    Returns:
        Configured RichHandler instance

    """
    if console is None:
        console = Console(file=sys.stderr, legacy_windows=False)

    return RichHandler(
        console=console,
        level=level,
        show_path=show_path,
        rich_tracebacks=rich_tracebacks,
        markup=False,
    )
