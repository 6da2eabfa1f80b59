"""
Strict JSON encoding and decoding.

The standard library encoder reports problems through a mix of TypeError,
ValueError and RecursionError, and happily accepts NaN or unbounded nesting.
``Json`` normalises all of that into two typed failures, JsonEncodeError and
JsonDecodeError, and enforces a maximum nesting depth in both directions.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum, IntFlag
from types import SimpleNamespace
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from pydantic import BaseModel

from model_presenter.errors import JsonDecodeError, JsonEncodeError

DEFAULT_DEPTH = 512

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class JsonOption(IntFlag):
    """Bit flags accepted by ``Json.encode`` and ``Json.decode``."""

    NONE = 0

    # Encoding
    PRETTY_PRINT = 1 << 0
    UNESCAPED_UNICODE = 1 << 1
    SORT_KEYS = 1 << 2
    FORCE_OBJECT = 1 << 3

    # Decoding
    BIGINT_AS_STRING = 1 << 8
    OBJECT_AS_ARRAY = 1 << 9
    INVALID_UTF8_IGNORE = 1 << 10
    INVALID_UTF8_SUBSTITUTE = 1 << 11


@runtime_checkable
class JsonSerializable(Protocol):
    """Objects that know how to turn themselves into JSON-ready data."""

    def json_serialize(self) -> Any: ...


@dataclass
class _EncodeState:
    depth: int
    force_object: bool


def _check_depth(depth: int) -> None:
    if depth <= 0:
        raise ValueError(f"Depth must be greater than zero, got {depth}")


def _prepare(value: Any, level: int, state: _EncodeState) -> Any:
    """Convert ``value`` into plain JSON types, enforcing depth."""
    if value is None or isinstance(value, (str, bool, int)):
        return value

    if isinstance(value, float):
        if not math.isfinite(value):
            raise JsonEncodeError("Inf and NaN cannot be JSON encoded")
        return value

    if isinstance(value, Mapping):
        if level + 1 > state.depth:
            raise JsonEncodeError("Maximum stack depth exceeded")
        return {key: _prepare(item, level + 1, state) for key, item in value.items()}

    if isinstance(value, (list, tuple)):
        if level + 1 > state.depth:
            raise JsonEncodeError("Maximum stack depth exceeded")
        items = [_prepare(item, level + 1, state) for item in value]
        if state.force_object:
            return {str(index): item for index, item in enumerate(items)}
        return items

    if isinstance(value, BaseModel):
        return _prepare(value.model_dump(mode="json"), level, state)

    if isinstance(value, JsonSerializable):
        return _prepare(value.json_serialize(), level, state)

    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Decimal):
        return _prepare(float(value), level, state)
    if isinstance(value, Enum):
        return _prepare(value.value, level, state)

    raise JsonEncodeError(f"Type is not supported: {type(value).__name__}")


def _nesting_depth(value: Any) -> int:
    """Deepest container nesting in decoded data (scalars are 0)."""
    deepest = 0
    stack: list[tuple[Any, int]] = [(value, 0)]
    while stack:
        item, level = stack.pop()
        if isinstance(item, SimpleNamespace):
            children: Any = vars(item).values()
        elif isinstance(item, dict):
            children = item.values()
        elif isinstance(item, list):
            children = item
        else:
            continue
        level += 1
        deepest = max(deepest, level)
        stack.extend((child, level) for child in children)
    return deepest


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Syntax error, unexpected {name}")


def _parse_int_as_string_if_big(literal: str) -> int | str:
    number = int(literal)
    if number < _INT64_MIN or number > _INT64_MAX:
        return literal
    return number


class Json:
    """Wrapper around the ``json`` module that raises on every failure."""

    @staticmethod
    def encode(value: Any, options: int = 0, depth: int = DEFAULT_DEPTH) -> str:
        """
        Encode a value as JSON text.

        Args:
            value: The value being encoded
            options: JsonOption bitmask
            depth: Maximum container nesting. Must be greater than zero.

        Returns:
            The JSON text, compact unless PRETTY_PRINT is set

        Raises:
            JsonEncodeError: If the value cannot be represented as JSON
        """
        _check_depth(depth)
        flags = int(options)
        state = _EncodeState(depth=depth, force_object=bool(flags & JsonOption.FORCE_OBJECT))
        pretty = bool(flags & JsonOption.PRETTY_PRINT)

        try:
            prepared = _prepare(value, 0, state)
            return json.dumps(
                prepared,
                ensure_ascii=not flags & JsonOption.UNESCAPED_UNICODE,
                allow_nan=False,
                sort_keys=bool(flags & JsonOption.SORT_KEYS),
                indent=4 if pretty else None,
                separators=(",", ": ") if pretty else (",", ":"),
            )
        except JsonEncodeError:
            raise
        except RecursionError as exc:
            raise JsonEncodeError("Maximum stack depth exceeded") from exc
        except (TypeError, ValueError) as exc:
            raise JsonEncodeError(str(exc)) from exc

    @staticmethod
    def decode(
        text: str | bytes | bytearray,
        as_object: bool = False,
        depth: int = DEFAULT_DEPTH,
        options: int = 0,
    ) -> Any:
        """
        Decode JSON text.

        Args:
            text: JSON data to parse
            as_object: When true, JSON objects become SimpleNamespace instances
                instead of dicts
            depth: Maximum container nesting. Must be greater than zero.
            options: JsonOption bitmask

        Returns:
            The decoded value (``None`` for the literal ``null``)

        Raises:
            JsonDecodeError: If the text is not valid JSON
        """
        _check_depth(depth)
        flags = int(options)

        if isinstance(text, (bytes, bytearray)):
            errors = "strict"
            if flags & JsonOption.INVALID_UTF8_IGNORE:
                errors = "ignore"
            elif flags & JsonOption.INVALID_UTF8_SUBSTITUTE:
                errors = "replace"
            try:
                text = bytes(text).decode("utf-8", errors)
            except UnicodeDecodeError as exc:
                raise JsonDecodeError(f"Malformed UTF-8 characters: {exc.reason}") from exc

        hooks: dict[str, Any] = {"parse_constant": _reject_constant}
        if as_object and not flags & JsonOption.OBJECT_AS_ARRAY:
            hooks["object_hook"] = lambda pairs: SimpleNamespace(**pairs)
        if flags & JsonOption.BIGINT_AS_STRING:
            hooks["parse_int"] = _parse_int_as_string_if_big

        try:
            data = json.loads(text, **hooks)
        except RecursionError as exc:
            raise JsonDecodeError("Maximum stack depth exceeded") from exc
        except (TypeError, ValueError) as exc:
            raise JsonDecodeError(str(exc)) from exc

        if _nesting_depth(data) > depth:
            raise JsonDecodeError("Maximum stack depth exceeded")

        return data
