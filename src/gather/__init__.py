from .aggregates import average, maximum, minimum
from .builder import Gather
from .criteria import GatherCriteria, Specification
from .evaluator import MemoryOperator, MemoryOperatorRegistry
from .exceptions import (
    AggregationError,
    AttributeAccessError,
    GatherError,
    OperatorNotFoundError,
    SpecificationBuildError,
    ValidationError,
)
from .executor import select, select_first, select_with_options
from .matcher import matches
from .operators import GatherOperation, JoinKind
from .operators_memory import build_default_registry
from .query_options import QueryOptions
from .reflect import NOT_FOUND, get_attribute
from .utils import regex_match, wildcard_match, wildcard_to_regex

__all__ = [
    # Core types
    "GatherOperation",
    "JoinKind",
    "GatherCriteria",
    "Specification",
    # Builder
    "Gather",
    # Execution
    "select",
    "select_first",
    "select_with_options",
    "matches",
    "QueryOptions",
    # Aggregates
    "minimum",
    "maximum",
    "average",
    # Evaluator / strategy
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_registry",
    # Attribute access
    "NOT_FOUND",
    "get_attribute",
    # Exceptions
    "GatherError",
    "ValidationError",
    "SpecificationBuildError",
    "OperatorNotFoundError",
    "AttributeAccessError",
    "AggregationError",
    # Utilities
    "regex_match",
    "wildcard_match",
    "wildcard_to_regex",
]
