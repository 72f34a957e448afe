"""Finding "alone" files: save path entries that no torrent in a client owns.

Only the top level of each save path is examined. When torrentctl and the
client see the file system under different paths (e.g. the client runs in
Docker), save path prefix mappings translate client paths to local ones.
"""

from __future__ import annotations

import logging
import os
import posixpath
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Sequence

from torrentctl.utils.exceptions import ValidationError

if TYPE_CHECKING:
    from torrentctl.models import Torrent

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    """Clean a path and use forward slashes as separator."""
    return posixpath.normpath(path.replace("\\", "/"))


def parse_save_path_mappings(rules: Iterable[str]) -> dict[str, str]:
    """Parse ``local_save_path|client_save_path`` rules.

    Returns:
        Mapping of local save path to client save path

    Raises:
        ValidationError: on a malformed rule

    """
    mappings: dict[str, str] = {}
    for rule in rules:
        local, sep, remote = rule.partition("|")
        if not sep or not local or not remote:
            msg = f"invalid map-save-path-prefix {rule!r}"
            raise ValidationError(msg)
        mappings[normalize_path(local)] = normalize_path(remote)
    return mappings


def map_content_path(content_path: str, mappings: dict[str, str]) -> str:
    """Translate a client content path to the local file system."""
    path = normalize_path(content_path)
    for local, remote in mappings.items():
        if path.startswith(remote + "/"):
            return local + path[len(remote):]
    return path


def content_roots(torrents: Iterable[Torrent], mappings: dict[str, str]) -> set[str]:
    """Local content root paths of all torrents."""
    return {map_content_path(t.content_path, mappings) for t in torrents}


@dataclass
class AloneScanResult:
    """Alone files found across save paths."""

    alone: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)


def find_alone_files(
    save_paths: Sequence[str],
    known_roots: set[str],
) -> AloneScanResult:
    """List top-level entries of the save paths not present in ``known_roots``.

    Entries that are themselves one of the save paths are skipped. A save
    path that cannot be read is recorded in ``errors`` and scanning goes on.
    """
    save_paths = [normalize_path(p) for p in save_paths]
    result = AloneScanResult()
    for save_path in save_paths:
        try:
            names = sorted(os.listdir(save_path))
        except OSError as e:
            logger.error("Failed to read save-path %s: %s", save_path, e)
            result.errors[save_path] = str(e)
            continue
        for name in names:
            full_path = posixpath.join(save_path, name)
            if full_path in save_paths:
                continue
            if full_path not in known_roots:
                result.alone.append(full_path)
    return result
