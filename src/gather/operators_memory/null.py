"""Null check operation: is_null."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import GatherOperation
from ..reflect import NOT_FOUND


class IsNullOperator(MemoryOperator):
    """True for ``None`` and for attributes the object does not have."""

    accepts_missing = True

    @property
    def name(self) -> GatherOperation:
        return GatherOperation.IS_NULL

    def evaluate(self, field_value: Any, _condition_value: Any) -> bool:
        return field_value is None or field_value is NOT_FOUND
