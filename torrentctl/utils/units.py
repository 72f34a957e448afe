"""Human readable byte sizes.

All multipliers are binary: ``10M`` and ``10MiB`` both mean 10 * 1024**2.
"""

from __future__ import annotations

import re

from torrentctl.utils.exceptions import ValidationError

_SIZE_RE = re.compile(r"^(\d+(?:\.\d+)?) ?([kKmMgGtTpPeE])?[iI]?[bB]?$")

_MULTIPLIERS: dict[str, int] = {
    "k": 1024,
    "m": 1024**2,
    "g": 1024**3,
    "t": 1024**4,
    "p": 1024**5,
    "e": 1024**6,
}

BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")


def parse_size(value: str) -> int:
    """Parse a size string such as ``500GiB``, ``1.5T`` or ``4096`` into bytes.

    Raises:
        ValidationError: if the string is not a valid size

    """
    match = _SIZE_RE.match(value.strip())
    if match is None:
        msg = f"Invalid size: {value!r}"
        raise ValidationError(msg)
    number = float(match.group(1))
    unit = match.group(2)
    multiplier = _MULTIPLIERS[unit.lower()] if unit else 1
    return int(number * multiplier)


def format_size(size: float) -> str:
    """Format a byte count as a short binary size, e.g. ``500GiB``."""
    value = float(size)
    unit_index = 0
    while value >= 1024.0 and unit_index < len(BINARY_UNITS) - 1:
        value /= 1024.0
        unit_index += 1
    return f"{value:.4g}{BINARY_UNITS[unit_index]}"
