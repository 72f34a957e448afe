"""Local file system reconciliation against client state."""

from __future__ import annotations

from torrentctl.storage.alone import (
    AloneScanResult,
    content_roots,
    find_alone_files,
    parse_save_path_mappings,
)

__all__ = [
    "AloneScanResult",
    "content_roots",
    "find_alone_files",
    "parse_save_path_mappings",
]
