"""
Query options for pagination.

``QueryOptions`` wraps a specification with result-shaping parameters.
The specification defines *what* to select; ``QueryOptions`` defines
*how many* of the matches are returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .criteria import Specification


@dataclass(frozen=True)
class QueryOptions:
    """
    Immutable container for result-shaping parameters.

    Attributes:
        specification: The filter specification (empty = match everything).
        limit: Maximum number of results; ``0`` or less means unbounded.
        skip: Number of matching items to discard before collecting;
            ``0`` or less means no skipping.
    """

    specification: Specification = field(default_factory=Specification)
    limit: int = 0
    skip: int = 0

    def with_specification(self, spec: Specification) -> QueryOptions:
        """Return a copy with the specification replaced."""
        return QueryOptions(specification=spec, limit=self.limit, skip=self.skip)

    def with_pagination(
        self,
        limit: int | None = None,
        skip: int | None = None,
    ) -> QueryOptions:
        """Return a copy with updated pagination parameters."""
        return QueryOptions(
            specification=self.specification,
            limit=limit if limit is not None else self.limit,
            skip=skip if skip is not None else self.skip,
        )

    @property
    def is_paginated(self) -> bool:
        return self.limit > 0 or self.skip > 0

    def to_dict(self) -> dict[str, object]:
        """Serialise to a JSON-compatible dictionary."""
        result: dict[str, object] = {"specification": self.specification.to_dict()}
        if self.limit > 0:
            result["limit"] = self.limit
        if self.skip > 0:
            result["skip"] = self.skip
        return result
