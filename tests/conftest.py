"""Shared pytest fixtures for presenter tests."""

import pytest

from model_presenter.config import get_config

_CONFIG_ENV_VARS = (
    "MODEL_PRESENTER_JSON_DEPTH",
    "MODEL_PRESENTER_TIMEZONE",
    "MODEL_PRESENTER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch):
    """Start every test from default configuration."""
    for var in _CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()
