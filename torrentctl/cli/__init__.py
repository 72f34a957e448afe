"""Command line interface for torrentctl."""

from __future__ import annotations

from torrentctl.cli.main import cli, main

__all__ = ["cli", "main"]
