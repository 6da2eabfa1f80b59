"""Support utilities."""

from model_presenter.support.json import Json, JsonOption, JsonSerializable

__all__ = ["Json", "JsonOption", "JsonSerializable"]
