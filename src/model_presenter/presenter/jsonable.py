"""JSON serialization shared by presenters."""

from __future__ import annotations

import logging
from typing import Any

from model_presenter.config import get_config
from model_presenter.logging import get_logger, log_with_context
from model_presenter.support.json import Json

logger = get_logger("Presenter")


class JsonableMixin:
    """Adds ``json_serialize()`` and ``to_json()`` on top of the host class's ``to_array()``."""

    def json_serialize(self) -> dict[str, Any]:
        """Convert the object into something JSON serializable."""
        return self.to_array()  # type: ignore[attr-defined,no-any-return]

    def to_json(self, options: Any = 0) -> str:
        """Convert the object to its JSON representation.

        Args:
            options: JsonOption bitmask; anything that is not an int is ignored
        """
        if isinstance(options, int) and not isinstance(options, bool):
            opts = options
        else:
            log_with_context(
                logger,
                logging.DEBUG,
                "Ignoring non-integer JSON options",
                options=repr(options),
                presenter=type(self).__name__,
            )
            opts = 0

        return Json.encode(self.json_serialize(), opts, depth=get_config().json_depth)
