"""Equality and ordering operations: equals, equals_ignore_case, >, >=, <, <=."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import GatherOperation


def _compare(field_value: Any, condition_value: Any) -> int | None:
    """
    Three-way compare *field_value* against *condition_value*.

    Returns a negative, zero or positive sign, or ``None`` when the two
    values have no ordering relative to each other.
    """
    if field_value is None or condition_value is None:
        return None
    try:
        if field_value == condition_value:
            return 0
        if field_value < condition_value:
            return -1
        if field_value > condition_value:
            return 1
    except TypeError:
        return None
    # partially ordered values such as sets or NaN
    return None


class EqualsOperator(MemoryOperator):
    @property
    def name(self) -> GatherOperation:
        return GatherOperation.EQUALS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None or condition_value is None:
            return False
        return bool(field_value == condition_value)


class EqualsIgnoreCaseOperator(MemoryOperator):
    """
    Case-insensitive for text attributes, plain equality otherwise.

    Case is folded with ``str.lower()``, so ``"straße"`` does not equal
    ``"STRASSE"``.
    """

    @property
    def name(self) -> GatherOperation:
        return GatherOperation.EQUALS_IGNORE_CASE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None or condition_value is None:
            return False
        if isinstance(field_value, str):
            return field_value.lower() == str(condition_value).lower()
        return bool(field_value == condition_value)


class GreaterThanOperator(MemoryOperator):
    @property
    def name(self) -> GatherOperation:
        return GatherOperation.GREATER_THAN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        sign = _compare(field_value, condition_value)
        return sign is not None and sign > 0


class GreaterThanOrEqualsOperator(MemoryOperator):
    @property
    def name(self) -> GatherOperation:
        return GatherOperation.GREATER_THAN_OR_EQUALS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        sign = _compare(field_value, condition_value)
        return sign is not None and sign >= 0


class LessThanOperator(MemoryOperator):
    @property
    def name(self) -> GatherOperation:
        return GatherOperation.LESS_THAN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        sign = _compare(field_value, condition_value)
        return sign is not None and sign < 0


class LessThanOrEqualsOperator(MemoryOperator):
    @property
    def name(self) -> GatherOperation:
        return GatherOperation.LESS_THAN_OR_EQUALS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        sign = _compare(field_value, condition_value)
        return sign is not None and sign <= 0
