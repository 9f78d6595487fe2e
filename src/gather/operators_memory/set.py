"""Membership operation: in."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import GatherOperation
from ..utils import contains


class InOperator(MemoryOperator):
    """
    True if the attribute equals one of the given values.

    Empty, ``None`` and non-collection operands never match.
    """

    @property
    def name(self) -> GatherOperation:
        return GatherOperation.IN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None or condition_value is None:
            return False
        return contains(condition_value, field_value)
