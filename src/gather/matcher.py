"""
Criteria matching engine.

A specification is a flat, ordered list of criteria with no precedence
grouping. Results are folded strictly left to right into an accumulator
that starts at ``False``::

    result = False
    for criteria in specification.criteria:
        raw = evaluate(item, criteria)
        if criteria.inverse:
            raw = not raw
        result = (result and raw) if criteria.join is AND else (result or raw)

Because the accumulator starts at ``False``, an AND-joined criteria can only
narrow a result that is already ``True``. ``where("a").is_(1).and_("b").is_(2)``
behaves as ``a == 1 and b == 2``, but a specification whose *first* criteria
is AND-joined never matches.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .operators import JoinKind
from .operators_memory import build_default_registry
from .reflect import get_attribute

if TYPE_CHECKING:
    from .criteria import GatherCriteria, Specification
    from .evaluator import MemoryOperatorRegistry

logger = logging.getLogger("gather.matcher")


def matches(
    item: Any,
    specification: Specification,
    registry: MemoryOperatorRegistry | None = None,
) -> bool:
    """
    Return ``True`` if *item* satisfies *specification*.

    ``None`` never matches. An empty specification matches everything else.

    Raises:
        AttributeAccessError: An attribute exists on *item* but cannot be read.
        OperatorNotFoundError: A criteria uses an operation the registry
            does not support.
    """
    if item is None:
        return False

    if specification.is_empty:
        return True

    if registry is None:
        registry = build_default_registry()

    result = False
    for criteria in specification.criteria:
        outcome = evaluate_criteria(item, criteria, registry)

        if criteria.inverse:
            outcome = not outcome

        if criteria.join is JoinKind.AND:
            result = result and outcome
        else:
            result = result or outcome

    return result


def evaluate_criteria(
    item: Any,
    criteria: GatherCriteria,
    registry: MemoryOperatorRegistry,
) -> bool:
    """Evaluate a single criteria against *item*, ignoring ``inverse``."""
    value = get_attribute(item, criteria.attribute)
    outcome = registry.evaluate(criteria.operation, value, criteria.value)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s %s %r against %r -> %s",
            criteria.attribute,
            criteria.operation.value,
            criteria.value,
            value,
            outcome,
        )
    return outcome
