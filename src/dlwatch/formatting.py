"""Human readable rendering of byte counts and durations."""
from __future__ import annotations

from typing import List, Tuple

_UNITS: List[Tuple[str, int]] = [
    ("GB", 1024 ** 3),
    ("MB", 1024 ** 2),
    ("KB", 1024),
]


def format_bytes(num_bytes: int) -> str:
    """Render ``num_bytes`` using the largest binary unit that keeps the value at or above 1.

    Plain bytes are shown as an integer, larger units with two decimals.
    """

    if num_bytes < 0:
        raise ValueError(f"byte count must be non-negative, got {num_bytes}")
    for suffix, factor in _UNITS:
        if num_bytes >= factor:
            return f"{num_bytes / factor:.2f} {suffix}"
    return f"{num_bytes} B"


def format_duration(seconds: int) -> str:
    """Render whole seconds as ``1h 2m 3s``, ``2m 3s`` or ``3s``."""

    if seconds < 0:
        raise ValueError(f"duration must be non-negative, got {seconds}")
    if seconds >= 3600:
        hours, remainder = divmod(seconds, 3600)
        minutes, secs = divmod(remainder, 60)
        return f"{hours}h {minutes}m {secs}s"
    if seconds >= 60:
        minutes, secs = divmod(seconds, 60)
        return f"{minutes}m {secs}s"
    return f"{seconds}s"
