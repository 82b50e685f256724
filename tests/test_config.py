from pathlib import Path

import pytest

from dlwatch.config import IDLE_LIMIT, POLL_INTERVAL, ConfigError, build_config


def test_defaults_are_fixed():
    config = build_config("downloads/file.iso")

    assert config.file_path == Path("downloads/file.iso")
    assert config.poll_interval == POLL_INTERVAL == 1.0
    assert config.idle_limit == IDLE_LIMIT == 5


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"file_path": "   "}, "must not be empty"),
        ({"file_path": 42}, "must be a string"),
        ({"file_path": "f", "poll_interval": "soon"}, "must be numeric"),
        ({"file_path": "f", "poll_interval": 0}, "must be positive"),
        ({"file_path": "f", "idle_limit": True}, "must be an integer"),
        ({"file_path": "f", "idle_limit": -1}, "must be positive"),
    ],
)
def test_invalid_values_raise_config_error(kwargs, message):
    with pytest.raises(ConfigError, match=message):
        build_config(**kwargs)
