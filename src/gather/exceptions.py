"""
Gather exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``GatherError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class GatherError(Exception):
    """Base exception for all gather errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(GatherError):
    """Specification structure validation failed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class SpecificationBuildError(ValidationError):
    """
    The fluent builder was used out of order.

    Raised while the query is being built, never during matching.
    """

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "SPECIFICATION_BUILD_ERROR",
            "message": self.message,
            "path": self.path,
        }


class OperatorNotFoundError(GatherError):
    """
    Unknown operation specified.

    Provides fuzzy-matched suggestions for likely intended operations.
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)

        message = f"Unknown operation: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operations: {', '.join(sorted(valid_operators))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class AttributeAccessError(GatherError):
    """
    An attribute is declared on the object but could not be read.

    This signals a broken object rather than a non-matching one, so it
    is never folded into a ``False`` match result.
    """

    def __init__(self, attribute: str, type_name: str) -> None:
        self.attribute = attribute
        self.type_name = type_name
        super().__init__(
            f"Unable to read value of attribute '{attribute}' on '{type_name}'"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "ATTRIBUTE_ACCESS_ERROR",
            "attribute": self.attribute,
            "type": self.type_name,
        }


class AggregationError(GatherError):
    """Collected attribute values cannot be aggregated together."""

    def __init__(self, attribute: str, reason: str) -> None:
        self.attribute = attribute
        self.reason = reason
        super().__init__(f"Cannot aggregate attribute '{attribute}': {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "AGGREGATION_ERROR",
            "attribute": self.attribute,
            "reason": self.reason,
        }
