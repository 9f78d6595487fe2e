"""
Fluent builder for constructing specifications.

Example::

    query = Gather.where("name").is_("sangupta").and_("age").less_than(40)
    people = query.find(collection)

    query = (
        Gather.where("role").is_("admin")
        .or_("role").is_("owner")
        .and_("email").not_().is_null()
    )
    # → ((role == "admin" or role == "owner") and email is not None)

Criteria are joined left to right without precedence, see
:mod:`gather.matcher` for the exact folding rule.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any, TypeVar

from .criteria import GatherCriteria, Specification
from .evaluator import MemoryOperatorRegistry
from .exceptions import SpecificationBuildError
from .executor import select, select_first
from .operators import GatherOperation, JoinKind
from .utils import is_value_collection

T = TypeVar("T")

logger = logging.getLogger("gather.builder")


class Gather:
    """
    Fluent query builder.

    Each comparison consumes the attribute name set by the preceding
    ``where`` / ``and_`` / ``or_`` call. Misuse raises
    :class:`SpecificationBuildError` immediately, so a finished
    :class:`Specification` is always well formed.
    """

    def __init__(self, *, registry: MemoryOperatorRegistry | None = None) -> None:
        self._registry = registry
        self._criteria: list[GatherCriteria] = []
        self._attribute: str | None = None
        # the first criteria folds into the initial False accumulator with OR
        self._join = JoinKind.OR
        self._inverse = False

    @classmethod
    def where(
        cls,
        attribute: str,
        *,
        registry: MemoryOperatorRegistry | None = None,
    ) -> Gather:
        """Start a query on *attribute*."""
        return cls(registry=registry)._set_attribute(attribute, JoinKind.OR)

    # -- attribute selection -------------------------------------------------

    def and_(self, attribute: str) -> Gather:
        """AND the next comparison, on *attribute*, into the result so far."""
        return self._set_attribute(attribute, JoinKind.AND)

    def or_(self, attribute: str) -> Gather:
        """OR the next comparison, on *attribute*, into the result so far."""
        return self._set_attribute(attribute, JoinKind.OR)

    def not_(self) -> Gather:
        """Negate the next comparison."""
        if self._attribute is None:
            raise SpecificationBuildError("Define an attribute first")
        self._inverse = True
        return self

    # -- comparisons ---------------------------------------------------------

    def is_(self, value: Any) -> Gather:
        """Attribute equals *value*."""
        return self._add(GatherOperation.EQUALS, value)

    def is_ignore_case(self, value: str) -> Gather:
        """Attribute equals *value*, ignoring case for text attributes."""
        if not isinstance(value, str):
            raise SpecificationBuildError(
                f"is_ignore_case() expects a string, got {type(value).__name__}",
                path=self._attribute,
            )
        return self._add(GatherOperation.EQUALS_IGNORE_CASE, value)

    def is_null(self) -> Gather:
        """Attribute is ``None`` or missing."""
        return self._add(GatherOperation.IS_NULL, None)

    def like(self, pattern: str) -> Gather:
        """Attribute matches wildcard *pattern* (``*`` and ``?``)."""
        if not isinstance(pattern, str):
            raise SpecificationBuildError(
                f"like() expects a string pattern, got {type(pattern).__name__}",
                path=self._attribute,
            )
        return self._add(GatherOperation.WILDCARD_MATCH, pattern)

    def regex(self, pattern: str | re.Pattern[str]) -> Gather:
        """Attribute fully matches regular expression *pattern*."""
        if isinstance(pattern, re.Pattern):
            if not isinstance(pattern.pattern, str):
                raise SpecificationBuildError(
                    f"regex() expects a text pattern, got {pattern!r}",
                    path=self._attribute,
                )
        elif not isinstance(pattern, str):
            raise SpecificationBuildError(
                f"regex() expects a string pattern, got {type(pattern).__name__}",
                path=self._attribute,
            )
        else:
            try:
                re.compile(pattern)
            except re.error as exc:
                raise SpecificationBuildError(
                    f"Invalid regular expression {pattern!r}: {exc}",
                    path=self._attribute,
                ) from exc
        return self._add(GatherOperation.REGEX_MATCH, pattern)

    def greater_than(self, value: Any) -> Gather:
        return self._add(GatherOperation.GREATER_THAN, value)

    def greater_than_or_equals(self, value: Any) -> Gather:
        return self._add(GatherOperation.GREATER_THAN_OR_EQUALS, value)

    def less_than(self, value: Any) -> Gather:
        return self._add(GatherOperation.LESS_THAN, value)

    def less_than_or_equals(self, value: Any) -> Gather:
        return self._add(GatherOperation.LESS_THAN_OR_EQUALS, value)

    def in_(self, values: Iterable[Any]) -> Gather:
        """Attribute equals one of *values*."""
        if not is_value_collection(values):
            raise SpecificationBuildError(
                f"in_() expects a collection of values, got {type(values).__name__}",
                path=self._attribute,
            )
        return self._add(GatherOperation.IN, tuple(values))

    # -- build / execute -----------------------------------------------------

    def build(self) -> Specification:
        """
        Finalise and return the immutable specification.

        Raises:
            SpecificationBuildError: If an attribute is still waiting
                for its comparison.
        """
        if self._attribute is not None:
            raise SpecificationBuildError(
                f"Attribute '{self._attribute}' has no comparison",
                path=self._attribute,
            )
        return Specification(criteria=tuple(self._criteria))

    def find(
        self,
        collection: Iterable[T] | None,
        limit: int = 0,
        skip: int = 0,
    ) -> list[T] | None:
        """Execute the query over *collection*."""
        return select(
            collection,
            self.build(),
            limit=limit,
            skip=skip,
            registry=self._registry,
        )

    def first(self, collection: Iterable[T] | None) -> T | None:
        """Return the first item of *collection* matching the query, or ``None``."""
        return select_first(collection, self.build(), registry=self._registry)

    # -- internals -----------------------------------------------------------

    def _set_attribute(self, attribute: str, join: JoinKind) -> Gather:
        if self._attribute is not None:
            raise SpecificationBuildError(
                "Add a comparison condition to previous attribute first",
                path=self._attribute,
            )
        if not attribute or not isinstance(attribute, str):
            raise SpecificationBuildError("Attribute name must be a non-empty string")
        self._attribute = attribute
        self._join = join
        return self

    def _add(self, operation: GatherOperation, value: Any) -> Gather:
        if self._attribute is None:
            raise SpecificationBuildError("Operation needs an attribute to work upon")

        criteria = GatherCriteria(
            attribute=self._attribute,
            operation=operation,
            value=value,
            join=self._join,
            inverse=self._inverse,
        )
        self._criteria.append(criteria)
        logger.debug(
            "Added criteria #%d: %s%s %s",
            len(self._criteria),
            "not " if criteria.inverse else "",
            criteria.attribute,
            criteria.operation.value,
        )

        self._attribute = None
        self._inverse = False
        return self
