"""Client configuration get/set."""

from __future__ import annotations

from torrentctl.clientctl.control import control_client
from torrentctl.clientctl.options import ALL_OPTIONS, Option, OptionType

__all__ = ["ALL_OPTIONS", "Option", "OptionType", "control_client"]
