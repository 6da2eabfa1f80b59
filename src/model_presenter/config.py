"""
Presenter configuration from environment variables.

Single source of truth for the JSON depth used when presenters serialize
themselves, the timezone applied by the date helper, and the default log level.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import cache

DEFAULT_JSON_DEPTH = 512
DEFAULT_TIMEZONE = "UTC"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class PresenterConfig:
    """Presenter configuration.

    Attributes:
        json_depth: Maximum nesting depth for ``to_json()`` output
        timezone: IANA zone attached to parsed or current datetimes (None keeps them naive)
        log_level: Default level name for ``setup_logging()``
    """

    json_depth: int = DEFAULT_JSON_DEPTH
    timezone: str | None = DEFAULT_TIMEZONE
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.json_depth <= 0:
            raise ValueError(f"json_depth must be greater than zero, got {self.json_depth}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for ``log_level``."""
        level: int = logging.getLevelName(self.log_level.upper())
        return level


@cache
def get_config() -> PresenterConfig:
    """Load presenter configuration from environment variables.

    Environment variables:
        - MODEL_PRESENTER_JSON_DEPTH → json_depth
        - MODEL_PRESENTER_TIMEZONE → timezone (empty string disables it)
        - MODEL_PRESENTER_LOG_LEVEL → log_level

    Returns:
        PresenterConfig with validated settings.
    """
    timezone = os.environ.get("MODEL_PRESENTER_TIMEZONE", DEFAULT_TIMEZONE).strip()

    return PresenterConfig(
        json_depth=int(os.environ.get("MODEL_PRESENTER_JSON_DEPTH", str(DEFAULT_JSON_DEPTH))),
        timezone=timezone or None,
        log_level=os.environ.get("MODEL_PRESENTER_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
