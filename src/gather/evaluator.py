"""
In-memory operation evaluation strategy.

Provides the MemoryOperator interface and a registry that maps
GatherOperation → evaluation strategy.

New evaluators are added (or built-in ones overridden) by subclassing
MemoryOperator and registering via ``register()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from .exceptions import OperatorNotFoundError
from .operators import GatherOperation
from .reflect import NOT_FOUND


class MemoryOperator(ABC):
    """
    Strategy interface for in-memory operation evaluation.

    Each operation is an isolated class with a single ``evaluate`` method.
    Evaluators only see :data:`~gather.reflect.NOT_FOUND` when
    ``accepts_missing`` is set; otherwise a missing attribute is a
    non-match and ``evaluate`` is never called.
    """

    accepts_missing: ClassVar[bool] = False

    @property
    @abstractmethod
    def name(self) -> GatherOperation:
        """The operation this strategy handles."""
        ...

    @abstractmethod
    def evaluate(
        self,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        """
        Evaluate the operation against concrete values.

        Args:
            field_value: The value read from the candidate object.
            condition_value: The value provided in the criteria.

        Returns:
            True if the condition is satisfied. Values that cannot be
            compared yield False rather than raising.
        """
        ...


class MemoryOperatorRegistry:
    """
    Registry of MemoryOperator instances keyed by GatherOperation.

    Usage::

        registry = MemoryOperatorRegistry()
        registry.register(EqualsOperator())

        result = registry.evaluate(GatherOperation.EQUALS, actual, expected)
    """

    def __init__(self) -> None:
        self._operators: dict[GatherOperation, MemoryOperator] = {}

    # -- registration --------------------------------------------------------

    def register(self, operator: MemoryOperator) -> None:
        """Register an operator strategy instance, replacing any previous one."""
        self._operators[operator.name] = operator

    def register_all(self, *operators: MemoryOperator) -> None:
        """Register multiple operator strategy instances at once."""
        for op in operators:
            self.register(op)

    def unregister(self, name: GatherOperation) -> None:
        """Remove an operator from the registry."""
        self._operators.pop(name, None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: GatherOperation) -> MemoryOperator | None:
        """Return the registered operator or ``None``."""
        return self._operators.get(name)

    def has(self, name: GatherOperation) -> bool:
        return name in self._operators

    @property
    def supported_operators(self) -> set[GatherOperation]:
        return set(self._operators.keys())

    # -- evaluation shortcut -------------------------------------------------

    def evaluate(
        self,
        name: GatherOperation,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        """
        Look up the operator and evaluate.

        A :data:`~gather.reflect.NOT_FOUND` field value short-circuits to
        ``False`` unless the operator accepts missing attributes.

        Raises:
            OperatorNotFoundError: If the operation is not registered.
        """
        op = self.get(name)
        if op is None:
            raise OperatorNotFoundError(
                str(getattr(name, "value", name)),
                [o.value for o in self._operators],
            )
        if field_value is NOT_FOUND and not op.accepts_missing:
            return False
        return op.evaluate(field_value, condition_value)
