"""Human-readable size strings ("10M", "512K") to byte counts.

Units are binary: ``1K == 1024`` bytes. ``K``, ``KB``, ``KiB`` and ``k``
are all accepted.
"""

from __future__ import annotations

import re

_SIZE_RE = re.compile(
    r"^\s*(?P<number>\d+(?:\.\d+)?)\s*(?P<unit>[kmgtp]?)(?:i?b)?\s*$",
    re.IGNORECASE,
)

_MULTIPLIERS: dict[str, int] = {
    "": 1,
    "k": 1024,
    "m": 1024**2,
    "g": 1024**3,
    "t": 1024**4,
    "p": 1024**5,
}


class SizeParseError(ValueError):
    """Raised when a size string cannot be parsed."""


def parse_size(text: str) -> int:
    """Parse *text* into a number of bytes.

    Args:
        text: A magnitude with an optional unit, e.g. ``"4096"``, ``"10M"``,
            ``"1.5 GiB"``.

    Returns:
        The size in bytes, truncated to an integer.

    Raises:
        SizeParseError: If *text* is not a valid size.
    """
    match = _SIZE_RE.match(text)
    if match is None:
        raise SizeParseError(f"Invalid size: '{text}'")

    number = match.group("number")
    multiplier = _MULTIPLIERS[match.group("unit").lower()]
    if "." in number:
        return int(float(number) * multiplier)
    return int(number) * multiplier


def try_parse_size(text: str) -> int | None:
    """Return ``parse_size(text)`` or ``None`` if *text* is malformed."""
    try:
        return parse_size(text)
    except SizeParseError:
        return None
