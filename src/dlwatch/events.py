"""Models shared between the monitor loop and the summary printer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class StopReason(str, Enum):
    """Why the monitor loop ended."""

    IDLE_TIMEOUT = "idle_timeout"
    FILE_INACCESSIBLE = "file_inaccessible"
    INTERRUPTED = "interrupted"


@dataclass(frozen=True)
class Observation:
    """A single size reading taken at one tick."""

    tick: int
    size: int
    delta: Optional[int] = None
