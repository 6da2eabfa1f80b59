"""
Presenters for ORM models.

This module exports the presenter base class, the binding mixin and the
capability contracts.
"""

from model_presenter.presenter.interface import (
    ModelPresentable,
    ModelPresenterInterface,
    PresenterInterface,
)
from model_presenter.presenter.jsonable import JsonableMixin
from model_presenter.presenter.model_presenter import ModelPresenter
from model_presenter.presenter.present_model import PresentModel, resolve_presenter_class

__all__ = [
    "JsonableMixin",
    "ModelPresentable",
    "ModelPresenter",
    "ModelPresenterInterface",
    "PresentModel",
    "PresenterInterface",
    "resolve_presenter_class",
]
