"""Text pattern operations: regex_match, wildcard_match."""

from __future__ import annotations

import re
from typing import Any

from ..evaluator import MemoryOperator
from ..operators import GatherOperation
from ..utils import regex_match, wildcard_match


class RegexMatchOperator(MemoryOperator):
    """Whole-string match against a compiled pattern or a raw pattern string."""

    @property
    def name(self) -> GatherOperation:
        return GatherOperation.REGEX_MATCH

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None or condition_value is None:
            return False
        pattern = (
            condition_value
            if isinstance(condition_value, re.Pattern)
            else str(condition_value)
        )
        return regex_match(str(field_value), pattern)


class WildcardMatchOperator(MemoryOperator):
    @property
    def name(self) -> GatherOperation:
        return GatherOperation.WILDCARD_MATCH

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None or condition_value is None:
            return False
        return wildcard_match(str(field_value), str(condition_value))
