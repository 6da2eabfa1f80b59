"""
Transparent model presenter.

A ModelPresenter wraps one model instance and forwards everything it does not
define itself to that model: attribute reads and writes, deletes, method calls
and item access. Subclasses add view helpers on top::

    class UserPresenter(ModelPresenter):
        def full_name(self) -> str:
            return f"{self.first_name} {self.last_name}".title()

    user.present().full_name()   # presenter method
    user.present().email         # model attribute
"""

from __future__ import annotations

import inspect
from datetime import date, datetime
from functools import cache
from typing import Any
from zoneinfo import ZoneInfo

from model_presenter import records
from model_presenter.config import get_config
from model_presenter.presenter.interface import ModelPresenterInterface
from model_presenter.presenter.jsonable import JsonableMixin

_MODEL_SLOT = "_model"


class ModelPresenter(JsonableMixin, ModelPresenterInterface):
    """Base class for presenters of ORM model instances."""

    def __init__(self, model: Any) -> None:
        object.__setattr__(self, _MODEL_SLOT, model)

    def get_model(self) -> Any:
        return self._model

    # -------------------------------------------------------------------------
    # Attribute delegation
    # -------------------------------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        # Only reached for names the presenter itself does not define.
        if name == _MODEL_SLOT or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        return getattr(self._model, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == _MODEL_SLOT:
            raise AttributeError(f"{type(self).__name__} cannot rebind its model")
        if hasattr(type(self), name) or name in _presenter_local_names(type(self)):
            object.__setattr__(self, name, value)
        else:
            setattr(self._model, name, value)

    def __delattr__(self, name: str) -> None:
        if name == _MODEL_SLOT:
            raise AttributeError(f"{type(self).__name__} cannot unbind its model")
        if name in self.__dict__:
            object.__delattr__(self, name)
        else:
            delattr(self._model, name)

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Call a model method by name, falling back to attribute access.

        If the model's class defines a routine called ``name`` it is invoked
        with the given arguments; otherwise the attribute value is returned
        and the arguments are ignored.
        """
        declared = getattr(type(self._model), name, None)
        if inspect.isroutine(declared) and callable(declared):
            return getattr(self._model, name)(*args, **kwargs)
        return getattr(self._model, name)

    # -------------------------------------------------------------------------
    # Item access
    # -------------------------------------------------------------------------

    def __getitem__(self, key: str) -> Any:
        return getattr(self._model, key)

    def __setitem__(self, key: str, value: Any) -> None:
        setattr(self._model, key, value)

    def __delitem__(self, key: str) -> None:
        delattr(self._model, key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return getattr(self._model, key, None) is not None

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_array(self) -> dict[str, Any]:
        return records.to_array(self._model)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def as_datetime(self, value: str | date | datetime | None = None) -> datetime:
        """Normalise a date-like value into a datetime.

        Strings are parsed as ISO 8601, dates become midnight of that day,
        datetimes are returned untouched and None means now. Dates, and naive
        results from strings and None, get the configured timezone.
        """
        if isinstance(value, datetime):
            return value

        zone = get_config().timezone
        tzinfo = ZoneInfo(zone) if zone else None

        if isinstance(value, date):
            return datetime(value.year, value.month, value.day, tzinfo=tzinfo)
        if value is None:
            return datetime.now(tzinfo)

        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None and tzinfo is not None:
            parsed = parsed.replace(tzinfo=tzinfo)
        return parsed

    def __repr__(self) -> str:
        return f"<{type(self).__name__} model={self._model!r}>"


@cache
def _presenter_local_names(cls: type) -> frozenset[str]:
    """Names annotated on presenter subclasses; assignments to them stay local."""
    names: set[str] = set()
    for klass in cls.__mro__:
        if klass is ModelPresenter:
            break
        names.update(inspect.get_annotations(klass))
    return frozenset(names)
