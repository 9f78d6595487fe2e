"""
Single-attribute aggregates over a collection.

Items without the attribute, and items where it is ``None``, are ignored.
Every function returns ``None`` when nothing was collected.
"""

from __future__ import annotations

from collections.abc import Iterable
from numbers import Number
from typing import Any

from .exceptions import AggregationError
from .reflect import NOT_FOUND, get_attribute


def _values(collection: Iterable[Any], attribute: str) -> list[Any]:
    values = []
    for item in collection:
        value = get_attribute(item, attribute)
        if value is NOT_FOUND or value is None:
            continue
        values.append(value)
    return values


def minimum(collection: Iterable[Any] | None, attribute: str) -> Any:
    """Smallest value of *attribute* across *collection*."""
    if collection is None:
        return None
    values = _values(collection, attribute)
    if not values:
        return None
    try:
        return min(values)
    except TypeError as exc:
        raise AggregationError(attribute, "values are not mutually ordered") from exc


def maximum(collection: Iterable[Any] | None, attribute: str) -> Any:
    """Largest value of *attribute* across *collection*."""
    if collection is None:
        return None
    values = _values(collection, attribute)
    if not values:
        return None
    try:
        return max(values)
    except TypeError as exc:
        raise AggregationError(attribute, "values are not mutually ordered") from exc


def average(collection: Iterable[Any] | None, attribute: str) -> float | None:
    """Arithmetic mean of *attribute* across *collection*."""
    if collection is None:
        return None
    values = _values(collection, attribute)
    if not values:
        return None
    for value in values:
        # bool is a Number subclass but not a quantity
        if isinstance(value, bool) or not isinstance(value, Number):
            raise AggregationError(
                attribute, f"non-numeric value of type {type(value).__name__}"
            )
    return float(sum(values)) / len(values)
