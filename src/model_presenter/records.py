"""
Record snapshots.

Presenters never interpret a record's attributes themselves; when they need the
full attribute set they ask the record for it through ``to_array()``. This
module implements that lookup for the record types we support:

* objects with their own ``to_array()`` or ``to_dict()``
* pydantic models
* SQLAlchemy mapped instances (column attributes, in mapper order)
* dataclasses
"""

from __future__ import annotations

import dataclasses
from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import InstanceState


def _normalize_value(value: Any) -> Any:
    """Convert column values into JSON-friendly Python values."""
    if isinstance(value, UUID):
        return str(value)
    elif isinstance(value, (datetime, date)):
        return value.isoformat()
    elif isinstance(value, Decimal):
        return float(value)
    else:
        return value


def is_mapped_instance(record: Any) -> bool:
    """Return True if ``record`` is an instance of a SQLAlchemy mapped class."""
    if isinstance(record, type):
        return False
    return isinstance(sa_inspect(record, raiseerr=False), InstanceState)


def column_snapshot(record: Any) -> dict[str, Any]:
    """Snapshot the column attributes of a SQLAlchemy mapped instance.

    Keys follow mapper order (declaration order, inherited columns first).
    Unloaded columns on transient instances read as None.

    Args:
        record: A mapped instance

    Returns:
        Ordered mapping of attribute key to normalised value
    """
    state = sa_inspect(record)
    return {
        attr.key: _normalize_value(getattr(record, attr.key))
        for attr in state.mapper.column_attrs
    }


def to_array(record: Any) -> dict[str, Any]:
    """Return the record's full attribute set as a plain dict.

    The record's own conversion method wins over framework introspection, so
    models that customise ``to_array()`` keep control of their output.

    Raises:
        TypeError: If the record type offers no way to snapshot itself
    """
    own = getattr(type(record), "to_array", None)
    if callable(own):
        return dict(record.to_array())

    own = getattr(type(record), "to_dict", None)
    if callable(own):
        return dict(record.to_dict())

    if isinstance(record, BaseModel):
        return record.model_dump(mode="json")

    if is_mapped_instance(record):
        return column_snapshot(record)

    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return dataclasses.asdict(record)

    raise TypeError(f"Cannot convert {type(record).__name__} to an array")
