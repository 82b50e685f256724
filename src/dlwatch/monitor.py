"""Polling loop that tracks the size of a single growing file."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .config import MonitorConfig
from .events import Observation, StopReason
from .formatting import format_bytes
from .signals import StopFlag
from .summary import DownloadSummary, print_summary

logger = logging.getLogger(__name__)


@dataclass
class MonitorState:
    """Counters owned by the monitor loop."""

    initial_size: Optional[int] = None
    previous_size: Optional[int] = None
    last_known_size: int = 0
    no_change_count: int = 0
    ticks: int = 0


def size_delta(previous: int, current: int) -> int:
    """Growth between two reads; a shrinking file counts as no growth."""

    return max(0, current - previous)


class DownloadMonitor:
    """Polls a file's size and reports download progress until stopped."""

    def __init__(
        self,
        config: MonitorConfig,
        stop_flag: Optional[StopFlag] = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._config = config
        self._stop_flag = stop_flag if stop_flag is not None else StopFlag()
        self._sleep = sleep
        self._clock = clock
        self._state = MonitorState()
        self._start_time = 0.0

    @property
    def state(self) -> MonitorState:
        return self._state

    def run(self) -> DownloadSummary:
        """Run the polling loop, print the summary and return it."""

        path = self._config.file_path
        print(f"Monitoring download speed for: {path}")
        print(f"Press Ctrl+C to stop (auto-exits after {self._config.idle_limit}s of no activity)\n")
        logger.info("Starting monitor for %s", path)

        self._start_time = self._clock()
        while not self._stop_flag.is_set():
            reason = self._tick()
            if reason is not None:
                return self._finish(reason)
            self._sleep(self._config.poll_interval)

        return self._finish(StopReason.INTERRUPTED)

    def _tick(self) -> Optional[StopReason]:
        state = self._state
        state.ticks += 1
        try:
            current_size = self._config.file_path.stat().st_size
        except OSError as exc:
            return self._handle_read_error(exc)

        state.last_known_size = current_size
        if state.initial_size is None:
            state.initial_size = current_size

        reason: Optional[StopReason] = None
        if state.previous_size is None:
            logger.debug("Tick %s: initial size %s", state.ticks, current_size)
            print(f"Initial size: {format_bytes(current_size)}")
        else:
            observation = Observation(
                tick=state.ticks,
                size=current_size,
                delta=size_delta(state.previous_size, current_size),
            )
            reason = self._record(observation)

        state.previous_size = current_size
        return reason

    def _record(self, observation: Observation) -> Optional[StopReason]:
        state = self._state
        logger.debug("Tick %s: size=%s delta=%s", observation.tick, observation.size, observation.delta)

        if not observation.delta:
            state.no_change_count += 1
            _write_status(
                f"\rSize: {format_bytes(observation.size)} | Speed: 0 B/s "
                f"(idle {state.no_change_count}/{self._config.idle_limit})    "
            )
        else:
            state.no_change_count = 0
            speed = int(observation.delta / self._config.poll_interval)
            _write_status(f"\rSize: {format_bytes(observation.size)} | Speed: {format_bytes(speed)}/s         ")

        if state.no_change_count >= self._config.idle_limit:
            logger.info("No growth for %s ticks; stopping", state.no_change_count)
            return StopReason.IDLE_TIMEOUT
        return None

    def _handle_read_error(self, exc: OSError) -> Optional[StopReason]:
        if self._state.previous_size is not None:
            logger.info("Lost access to %s: %s", self._config.file_path, exc)
            print(f"\nFile no longer accessible: {exc}")
            return StopReason.FILE_INACCESSIBLE

        logger.debug("Waiting for %s: %s", self._config.file_path, exc)
        _write_status("\rWaiting for file to appear...    ")
        return None

    def _finish(self, reason: StopReason) -> DownloadSummary:
        elapsed = max(0, int(self._clock() - self._start_time))
        summary = DownloadSummary(
            initial_size=self._state.initial_size,
            final_size=self._state.last_known_size,
            elapsed_seconds=elapsed,
            reason=reason,
        )
        print_summary(summary)
        logger.info(
            "Monitor stopped (%s) after %s ticks, %s bytes downloaded",
            reason.value,
            self._state.ticks,
            summary.total_downloaded,
        )
        return summary


def _write_status(text: str) -> None:
    print(text, end="", flush=True)
