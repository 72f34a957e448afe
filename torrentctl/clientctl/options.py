"""Client configuration options for ``clientctl``.

Besides the client-neutral options below, names prefixed with ``qb_`` or
``tr_`` are passed through unchanged to qBittorrent preferences or
Transmission session settings respectively.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from torrentctl.utils.exceptions import ValidationError
from torrentctl.utils.units import format_size, parse_size


class OptionType(IntEnum):
    """How an option value is interpreted and displayed."""

    NORMAL = 0
    SPEED = 1
    SIZE = 2


@dataclass(frozen=True)
class Option:
    """A client configuration option."""

    name: str
    type: OptionType
    readonly: bool
    auto: bool
    description: str

    @property
    def permission(self) -> str:
        return "r" if self.readonly else "rw"


ALL_OPTIONS: tuple[Option, ...] = (
    Option("global_download_speed_limit", OptionType.SPEED, False, True,
           "Global download speed limit (/s)"),
    Option("global_upload_speed_limit", OptionType.SPEED, False, True,
           "Global upload speed limit (/s)"),
    Option("global_download_speed", OptionType.SPEED, True, False,
           "Current global download speed (/s)"),
    Option("global_upload_speed", OptionType.SPEED, True, False,
           "Current global upload speed (/s)"),
    Option("free_disk_space", OptionType.SIZE, True, False,
           "Current free disk space of default save path"),
    Option("save_path", OptionType.NORMAL, False, False, "Default save path"),
    Option("qb_*", OptionType.NORMAL, False, False,
           "The qBittorrent specific preferences. For full list see "
           "https://github.com/qbittorrent/qBittorrent/wiki/WebUI-API-(qBittorrent-4.1)"
           "#get-application-preferences . E.g. qb_start_paused_enabled"),
    Option("tr_*", OptionType.NORMAL, False, False,
           "The transmission specific preferences. For full list see "
           "https://github.com/transmission/transmission/blob/3.00/extras/rpc-spec.txt#L482 . "
           "Convert argument name to snake_case. E.g. tr_config_dir"),
)

PASSTHROUGH_PREFIXES: dict[str, str] = {
    "qbittorrent": "qb_",
    "transmission": "tr_",
}


def auto_option_names() -> list[str]:
    """Names of the options queried when no variable is given."""
    return [option.name for option in ALL_OPTIONS if option.auto]


def find_option(name: str) -> Option:
    """Look up a client-neutral option by name.

    Raises:
        ValidationError: if the option does not exist

    """
    for option in ALL_OPTIONS:
        if option.name == name and not option.name.endswith("*"):
            return option
    msg = f"Unrecognized parameter: {name}"
    raise ValidationError(msg)


def parse_assignment(variable: str) -> tuple[str, str | None]:
    """Split ``name=value`` into its parts; the value is None for a bare name."""
    name, sep, value = variable.partition("=")
    return name, (value if sep else None)


def is_passthrough(client_type: str, name: str) -> bool:
    """Whether a name is a client-specific setting for this client type."""
    prefix = PASSTHROUGH_PREFIXES.get(client_type.lower())
    return prefix is not None and name.startswith(prefix) and len(name) > len(prefix)


def to_client_value(option: Option, value: str) -> str:
    """Convert a user value to what the client expects (byte counts for sizes)."""
    if option.type == OptionType.NORMAL:
        return value
    return str(parse_size(value))


def format_option(name: str, value: str, option: Option, raw: bool = False) -> str:
    """Format an option for display as ``name=value``."""
    if value == "" or option.type == OptionType.NORMAL:
        return f"{name}={value}"
    try:
        size = parse_size(value)
    except ValidationError:
        return f"{name}={value}"
    if raw:
        return f"{name}={size}"
    if option.type == OptionType.SPEED:
        return f"{name}={format_size(size)}/s"
    return f"{name}={format_size(size)}"
