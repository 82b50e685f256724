from pathlib import Path
from typing import List, Optional

import pytest

from dlwatch.config import build_config
from dlwatch.monitor import DownloadMonitor
from dlwatch.signals import StopFlag


class ScriptedDownload:
    """Rewrites a file to the next scripted size each time the monitor sleeps.

    ``None`` removes the file. When the script runs out the stop flag is set,
    as if the user pressed Ctrl+C.
    """

    def __init__(self, path: Path, sizes: List[Optional[int]]):
        self.path = path
        self.sizes = sizes
        self.index = 0
        self.now = 0.0
        self.sleeps = 0
        self.stop_flag = StopFlag()
        self._apply(sizes[0])

    def sleep(self, seconds: float) -> None:
        self.now += seconds
        self.sleeps += 1
        self.index += 1
        if self.index >= len(self.sizes):
            self.stop_flag.set()
            return
        self._apply(self.sizes[self.index])

    def clock(self) -> float:
        return self.now

    def monitor(self) -> DownloadMonitor:
        return DownloadMonitor(
            build_config(str(self.path)),
            self.stop_flag,
            sleep=self.sleep,
            clock=self.clock,
        )

    def _apply(self, size: Optional[int]) -> None:
        if size is None:
            if self.path.exists():
                self.path.unlink()
            return
        self.path.write_bytes(b"\0" * size)


@pytest.fixture
def scripted(tmp_path):
    def _make(sizes: List[Optional[int]]) -> ScriptedDownload:
        return ScriptedDownload(tmp_path / "download.bin", sizes)

    return _make
