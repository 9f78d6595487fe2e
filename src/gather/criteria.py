"""
Immutable query model.

A :class:`Specification` is an ordered tuple of :class:`GatherCriteria`.
Both are frozen pydantic models: once built they are shared read-only
between the matcher, the executor and any number of concurrent callers.

Specifications round-trip through plain dictionaries / JSON::

    {
        "criteria": [
            {"attr": "name", "op": "equals", "val": "Alice"},
            {"attr": "age", "op": "greater_than", "val": 28, "join": "and"},
            {"attr": "email", "op": "is_null", "inverse": true}
        ]
    }
"""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .exceptions import OperatorNotFoundError, ValidationError
from .operators import GatherOperation, JoinKind

# Pre-compute valid values for validation
_VALID_OPERATORS: frozenset[str] = frozenset(m.value for m in GatherOperation)
_VALID_JOINS: frozenset[str] = frozenset(m.value for m in JoinKind)


class GatherCriteria(BaseModel):
    """
    One attribute-scoped test inside a specification.

    Attributes:
        attribute: Name of the attribute read from each candidate.
        operation: The comparison applied to the attribute value.
        value: The operand the attribute is compared against
            (``None`` for :attr:`GatherOperation.IS_NULL`).
        join: How the result folds into the results of the criteria before it.
        inverse: Negate the comparison result before folding.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    attribute: str
    operation: GatherOperation
    value: Any = None
    join: JoinKind = JoinKind.OR
    inverse: bool = False

    @field_validator("attribute")
    @classmethod
    def _attribute_required(cls, value: str) -> str:
        if not value:
            raise ValueError("attribute name is required")
        return value

    @model_validator(mode="after")
    def _regex_compiles(self) -> GatherCriteria:
        if self.operation is GatherOperation.REGEX_MATCH:
            problem = _regex_problem(self.value)
            if problem is not None:
                raise ValueError(problem)
        return self

    def to_dict(self) -> dict[str, Any]:
        value = self.value.pattern if isinstance(self.value, re.Pattern) else self.value
        return {
            "attr": self.attribute,
            "op": self.operation.value,
            "val": value,
            "join": self.join.value,
            "inverse": self.inverse,
        }


class Specification(BaseModel):
    """Ordered, immutable list of criteria evaluated left to right."""

    model_config = ConfigDict(frozen=True)

    criteria: tuple[GatherCriteria, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.criteria

    def with_criteria(self, criteria: GatherCriteria) -> Specification:
        """Return a copy with *criteria* appended."""
        return Specification(criteria=(*self.criteria, criteria))

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {"criteria": [c.to_dict() for c in self.criteria]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Specification:
        """
        Create a specification from its dictionary form.

        Raises:
            ValidationError: On the first structural problem found.
            OperatorNotFoundError: On an unknown operation name.
        """
        nodes = _criteria_nodes(data)
        criteria: list[GatherCriteria] = []
        for idx, node in enumerate(nodes):
            path = f"<root>.criteria[{idx}]"
            _validate_node(node, path)
            criteria.append(
                GatherCriteria(
                    attribute=node["attr"],
                    operation=GatherOperation(node["op"].lower()),
                    value=node.get("val"),
                    join=JoinKind(node.get("join", JoinKind.OR.value).lower()),
                    inverse=node.get("inverse", False),
                )
            )
        return cls(criteria=tuple(criteria))

    @classmethod
    def from_json(cls, text: str) -> Specification:
        """Parse a JSON string and build a specification."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Invalid JSON: {exc}",
                path="<root>",
            ) from exc

        return cls.from_dict(data)

    @staticmethod
    def validate_dict(data: Any) -> list[str]:
        """
        Validate a specification dict and return a list of error messages.

        Returns an empty list when the structure is valid.
        """
        try:
            nodes = _criteria_nodes(data)
        except ValidationError as exc:
            return [f"{exc.path}: {exc.message}"]

        errors: list[str] = []
        for idx, node in enumerate(nodes):
            path = f"<root>.criteria[{idx}]"
            try:
                _validate_node(node, path)
            except ValidationError as exc:
                errors.append(f"{exc.path}: {exc.message}")
            except OperatorNotFoundError as exc:
                errors.append(f"{path}: unknown operation '{exc.operator}'")
        return errors


# -- validation helpers --------------------------------------------------------


def _criteria_nodes(data: Any) -> list[Any]:
    if not isinstance(data, dict):
        raise ValidationError(
            f"Expected a dict, got {type(data).__name__}",
            path="<root>",
        )
    nodes = data.get("criteria", [])
    if not isinstance(nodes, list):
        raise ValidationError("'criteria' must be a list", path="<root>")
    return nodes


def _validate_node(node: Any, path: str) -> None:
    """Raise on the first problem with a single criteria node (fail-fast)."""
    if not isinstance(node, dict):
        raise ValidationError(
            f"Expected a dict, got {type(node).__name__}",
            path=path,
        )

    attr = node.get("attr")
    if not attr or not isinstance(attr, str):
        raise ValidationError(f"Criteria missing 'attr': {node}", path=path)

    op = node.get("op")
    if not op or not isinstance(op, str):
        raise ValidationError("Missing or empty 'op' key", path=path)
    if op.lower() not in _VALID_OPERATORS:
        raise OperatorNotFoundError(op.lower(), sorted(_VALID_OPERATORS))

    join = node.get("join", JoinKind.OR.value)
    if not isinstance(join, str) or join.lower() not in _VALID_JOINS:
        raise ValidationError(
            f"'join' must be one of {sorted(_VALID_JOINS)}, got {join!r}",
            path=path,
        )

    if not isinstance(node.get("inverse", False), bool):
        raise ValidationError("'inverse' must be a boolean", path=path)

    if op.lower() == GatherOperation.REGEX_MATCH.value:
        problem = _regex_problem(node.get("val"))
        if problem is not None:
            raise ValidationError(problem, path=path)


def _regex_problem(value: Any) -> str | None:
    """Describe why *value* cannot be used as a text regular expression."""
    if isinstance(value, re.Pattern):
        if isinstance(value.pattern, str):
            return None
        return f"Regular expression must be text, got {type(value.pattern).__name__}"
    if not isinstance(value, str):
        return f"Regular expression must be a string, got {type(value).__name__}"
    try:
        re.compile(value)
    except re.error as exc:
        return f"Invalid regular expression {value!r}: {exc}"
    return None
