from enum import Enum


class GatherOperation(str, Enum):
    """Supported comparison operations for a single criteria."""

    EQUALS = "equals"
    EQUALS_IGNORE_CASE = "equals_ignore_case"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUALS = "greater_than_or_equals"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUALS = "less_than_or_equals"
    IN = "in"
    IS_NULL = "is_null"
    REGEX_MATCH = "regex_match"
    WILDCARD_MATCH = "wildcard_match"


class JoinKind(str, Enum):
    """How a criteria result folds into the running result."""

    AND = "and"
    OR = "or"
