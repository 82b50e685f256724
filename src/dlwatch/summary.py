"""Final download summary."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .events import StopReason
from .formatting import format_bytes, format_duration


@dataclass(frozen=True)
class DownloadSummary:
    """Totals computed when the monitor stops."""

    initial_size: Optional[int]
    final_size: int
    elapsed_seconds: int
    reason: StopReason

    @property
    def total_downloaded(self) -> int:
        return max(0, self.final_size - (self.initial_size or 0))

    @property
    def average_speed(self) -> Optional[int]:
        """Bytes per second over the whole run, or ``None`` if no time elapsed."""

        if self.elapsed_seconds <= 0:
            return None
        return self.total_downloaded // self.elapsed_seconds

    def lines(self) -> List[str]:
        lines = [
            "--- Download Summary ---",
            f"Total downloaded: {format_bytes(self.total_downloaded)}",
            f"Final size: {format_bytes(self.final_size)}",
            f"Duration: {format_duration(self.elapsed_seconds)}",
        ]
        speed = self.average_speed
        if speed is not None:
            lines.append(f"Average speed: {format_bytes(speed)}/s")
        return lines


def print_summary(summary: DownloadSummary) -> None:
    """Print the summary block below the live status line."""

    print("\n")
    for line in summary.lines():
        print(line)
