"""
Model Presenter

View-logic decorators for ORM models, plus a strict JSON codec.

This package provides:
- PresentModel: mixin binding a model class to its presenter
- ModelPresenter: transparent proxy presenter with room for view helpers
- Json: JSON encode/decode that raises typed errors on every failure
"""

from model_presenter._version import get_version as _get_version

__version__ = _get_version()

from model_presenter.config import PresenterConfig, get_config
from model_presenter.errors import (
    InvalidPresenterError,
    JsonDecodeError,
    JsonEncodeError,
    JsonError,
    PresenterClassNotDefinedError,
    PresenterError,
)
from model_presenter.presenter import (
    ModelPresentable,
    ModelPresenter,
    ModelPresenterInterface,
    PresenterInterface,
    PresentModel,
    resolve_presenter_class,
)
from model_presenter.support.json import Json, JsonOption

__all__ = [
    "InvalidPresenterError",
    "Json",
    "JsonDecodeError",
    "JsonEncodeError",
    "JsonError",
    "JsonOption",
    "ModelPresentable",
    "ModelPresenter",
    "ModelPresenterInterface",
    "PresentModel",
    "PresenterClassNotDefinedError",
    "PresenterConfig",
    "PresenterError",
    "PresenterInterface",
    "get_config",
    "resolve_presenter_class",
]
