"""Run configuration for the download monitor."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

POLL_INTERVAL = 1.0
IDLE_LIMIT = 5


class ConfigError(Exception):
    """Raised when the monitor settings are missing or invalid."""


@dataclass(frozen=True)
class MonitorConfig:
    """Options describing how the download monitor should behave."""

    file_path: Path
    poll_interval: float = POLL_INTERVAL
    idle_limit: int = IDLE_LIMIT


def build_config(file_path: Any, *, poll_interval: Any = POLL_INTERVAL, idle_limit: Any = IDLE_LIMIT) -> MonitorConfig:
    """Validate raw values and build a :class:`MonitorConfig`."""

    if isinstance(file_path, Path):
        path = file_path
    elif isinstance(file_path, str):
        if not file_path.strip():
            raise ConfigError("file path must not be empty")
        path = Path(file_path)
    else:
        raise ConfigError("file path must be a string")

    try:
        poll_interval_val = float(poll_interval)
    except (TypeError, ValueError) as exc:
        raise ConfigError("poll_interval must be numeric") from exc
    if poll_interval_val <= 0:
        raise ConfigError("poll_interval must be positive")

    if isinstance(idle_limit, bool) or not isinstance(idle_limit, int):
        raise ConfigError("idle_limit must be an integer")
    if idle_limit <= 0:
        raise ConfigError("idle_limit must be positive")

    logger.debug("Monitor config: path=%s interval=%ss idle_limit=%s", path, poll_interval_val, idle_limit)
    return MonitorConfig(file_path=path, poll_interval=poll_interval_val, idle_limit=idle_limit)
