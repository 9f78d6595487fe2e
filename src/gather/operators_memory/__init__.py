"""
In-memory operation implementations.

Provides concrete MemoryOperator subclasses for each GatherOperation
and a factory function to create registries.

Usage::

    from gather.operators_memory import build_default_registry

    registry = build_default_registry()
    result = registry.evaluate(GatherOperation.EQUALS, actual, expected)
"""

from __future__ import annotations

from ..evaluator import MemoryOperatorRegistry
from .null import IsNullOperator
from .set import InOperator
from .standard import (
    EqualsIgnoreCaseOperator,
    EqualsOperator,
    GreaterThanOperator,
    GreaterThanOrEqualsOperator,
    LessThanOperator,
    LessThanOrEqualsOperator,
)
from .string import RegexMatchOperator, WildcardMatchOperator


def build_default_registry() -> MemoryOperatorRegistry:
    """
    Create a registry with all built-in operations.

    Each call returns a fresh registry, so callers may register or
    override evaluators without affecting anyone else.

    Example:
        >>> registry = build_default_registry()
        >>> registry.evaluate(GatherOperation.EQUALS, "active", "active")
        True
    """
    registry = MemoryOperatorRegistry()
    registry.register_all(
        # Equality
        EqualsOperator(),
        EqualsIgnoreCaseOperator(),
        # Ordering
        GreaterThanOperator(),
        GreaterThanOrEqualsOperator(),
        LessThanOperator(),
        LessThanOrEqualsOperator(),
        # Membership
        InOperator(),
        # Null
        IsNullOperator(),
        # Patterns
        RegexMatchOperator(),
        WildcardMatchOperator(),
    )
    return registry


__all__ = [
    "build_default_registry",
    "MemoryOperatorRegistry",
]
