"""
Presenter capability contracts.

``ModelPresenterInterface`` is what a model's ``presenter`` declaration must
resolve to. ``ModelPresentable`` is the structural type of models that can
present themselves; it is a protocol rather than a base class so it never
competes with the ORM's own metaclass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable


class PresenterInterface(ABC):
    """Array-like, JSON-serializable view object."""

    @abstractmethod
    def to_array(self) -> dict[str, Any]:
        """Return the presented attributes as a plain dict."""

    @abstractmethod
    def json_serialize(self) -> Any:
        """Return data ready for JSON encoding."""

    @abstractmethod
    def to_json(self, options: Any = 0) -> str:
        """Return the JSON representation."""

    @abstractmethod
    def __getitem__(self, key: str) -> Any: ...

    @abstractmethod
    def __setitem__(self, key: str, value: Any) -> None: ...

    @abstractmethod
    def __delitem__(self, key: str) -> None: ...

    @abstractmethod
    def __contains__(self, key: object) -> bool: ...


class ModelPresenterInterface(PresenterInterface):
    """Presenter wrapping exactly one model instance.

    Implementations are constructed with the model as their only argument.
    """

    @abstractmethod
    def get_model(self) -> Any:
        """Return the wrapped model (the same object, never a copy)."""


@runtime_checkable
class ModelPresentable(Protocol):
    """Models that can produce their presenter."""

    def present(self) -> ModelPresenterInterface: ...
