"""Tests for minimum / maximum / average."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pytest

from gather import AggregationError, average, maximum, minimum


@dataclass
class Item:
    price: object


def test_min_max_average():
    items = [Item(3), Item(1), Item(8)]
    assert minimum(items, "price") == 1
    assert maximum(items, "price") == 8
    assert average(items, "price") == 4.0


def test_skips_missing_and_none_values():
    items = [Item(None), {"price": 4}, object(), Item(2), None]
    assert minimum(items, "price") == 2
    assert maximum(items, "price") == 4
    assert average(items, "price") == 3.0


def test_nothing_collected_is_none():
    assert minimum([], "price") is None
    assert maximum([Item(None)], "price") is None
    assert average([object()], "price") is None


def test_absent_collection_is_none():
    assert minimum(None, "price") is None
    assert maximum(None, "price") is None
    assert average(None, "price") is None


def test_min_max_on_ordered_non_numeric_values():
    items = [Item(date(2017, 5, 1)), Item(date(2016, 1, 1))]
    assert minimum(items, "price") == date(2016, 1, 1)
    assert maximum(items, "price") == date(2017, 5, 1)


def test_unorderable_values_raise():
    with pytest.raises(AggregationError, match="not mutually ordered"):
        minimum([Item(1), Item("a")], "price")


@pytest.mark.parametrize("value", ["3", True, date(2017, 1, 1)])
def test_average_requires_numbers(value):
    with pytest.raises(AggregationError, match="non-numeric"):
        average([Item(1), Item(value)], "price")
