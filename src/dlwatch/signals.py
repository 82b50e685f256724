"""Interrupt handling for the monitor loop."""
from __future__ import annotations

import logging
import signal
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class SignalSetupError(RuntimeError):
    """Raised when the interrupt handlers cannot be installed."""


class StopFlag:
    """Single-writer stop request shared with a signal handler.

    Only a plain attribute is assigned so that the handler never takes a lock
    the interrupted main thread may already hold.
    """

    def __init__(self) -> None:
        self._requested = False

    def set(self) -> None:
        self._requested = True

    def is_set(self) -> bool:
        return self._requested


def _stop_signals() -> List[signal.Signals]:
    signals = [signal.SIGINT]
    sigterm = getattr(signal, "SIGTERM", None)
    if sigterm is not None:
        signals.append(sigterm)
    return signals


def install_stop_handler(flag: Optional[StopFlag] = None) -> StopFlag:
    """Install SIGINT/SIGTERM handlers that set ``flag`` and return it.

    The handlers live for the rest of the process.
    """

    stop_flag = flag if flag is not None else StopFlag()

    def _handler(signum: int, _frame: Any) -> None:
        stop_flag.set()

    for signum in _stop_signals():
        try:
            signal.signal(signum, _handler)
        except (ValueError, OSError) as exc:
            raise SignalSetupError(f"Error setting handler for {signum.name}: {exc}") from exc
        logger.debug("Installed stop handler for %s", signum.name)

    return stop_flag
