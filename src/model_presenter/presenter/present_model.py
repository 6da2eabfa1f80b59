"""
Model-to-presenter binding.

A model class opts in by mixing in ``PresentModel`` and naming its presenter::

    class User(PresentModel, Base):
        __tablename__ = "users"
        presenter = "app.presenters:UserPresenter"

The reference may be the class itself, a ``module:Class`` / ``module.Class``
path, or a bare class name looked up in the model's own module. It is only
resolved and validated the first time ``present()`` is called.
"""

from __future__ import annotations

import importlib
import logging
import sys
from typing import Any

from model_presenter.errors import InvalidPresenterError, PresenterClassNotDefinedError
from model_presenter.logging import get_logger, log_with_context
from model_presenter.presenter.interface import ModelPresenterInterface

logger = get_logger("Binding")

PRESENTER_ATTRIBUTE = "presenter"
CACHE_SLOT = "_presenter_instance"


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _import_module(module_name: str, reference: str) -> Any:
    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        # A missing dependency inside an existing module is not our problem
        # to reinterpret; only a missing target module is.
        if exc.name and (module_name == exc.name or module_name.startswith(f"{exc.name}.")):
            raise InvalidPresenterError(
                f"Presenter class `{reference}` does not exist",
                presenter_class=reference,
            ) from exc
        raise


def _import_reference(reference: str, model_cls: type) -> Any:
    """Resolve a string presenter reference to the object it names."""
    if ":" in reference:
        module_name, _, attr_path = reference.partition(":")
    elif "." in reference:
        module_name, _, attr_path = reference.rpartition(".")
    else:
        module_name, attr_path = model_cls.__module__, reference

    if not module_name or not attr_path:
        raise InvalidPresenterError(
            f"Presenter class `{reference}` does not exist",
            presenter_class=reference,
        )

    module = sys.modules.get(module_name) or _import_module(module_name, reference)

    target: Any = module
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise InvalidPresenterError(
                f"Presenter class `{reference}` does not exist",
                presenter_class=reference,
            ) from exc
    return target


def resolve_presenter_class(model_cls: type) -> type[ModelPresenterInterface]:
    """Resolve and validate the presenter declared on ``model_cls``.

    Args:
        model_cls: A model class declaring a ``presenter`` attribute

    Returns:
        The presenter class

    Raises:
        PresenterClassNotDefinedError: If no presenter is declared
        InvalidPresenterError: If the declaration cannot be resolved or does
            not implement ModelPresenterInterface
    """
    reference = getattr(model_cls, PRESENTER_ATTRIBUTE, None)
    if reference is None:
        raise PresenterClassNotDefinedError(
            "The `presenter` class is not defined",
            model=model_cls.__name__,
        )

    if isinstance(reference, str):
        name = reference
        presenter_class = _import_reference(reference, model_cls)
    elif isinstance(reference, type):
        name = _qualified_name(reference)
        presenter_class = reference
    else:
        name = repr(reference)
        presenter_class = None

    if not (isinstance(presenter_class, type) and issubclass(presenter_class, ModelPresenterInterface)):
        raise InvalidPresenterError(
            f"Presenter class `{name}` must implement {ModelPresenterInterface.__name__}",
            presenter_class=name,
        )

    return presenter_class


class PresentModel:
    """Mixin giving model instances a lazily built, cached presenter."""

    def present(self) -> ModelPresenterInterface:
        """Return this model's presenter, creating it on first use.

        Raises:
            PresenterClassNotDefinedError: If the model declares no presenter
            InvalidPresenterError: If the declared presenter is unusable
        """
        cached = getattr(self, CACHE_SLOT, None)
        if cached is not None and cached.get_model() is self:
            return cached

        presenter_class = resolve_presenter_class(type(self))
        presenter = presenter_class(self)  # type: ignore[call-arg]
        setattr(self, CACHE_SLOT, presenter)

        log_with_context(
            logger,
            logging.DEBUG,
            "Presenter bound",
            model=type(self).__name__,
            presenter=_qualified_name(presenter_class),
        )
        return presenter
