"""
Selection driver: runs a specification over a collection.

``select`` keeps the source order, applies ``skip`` to matching items only
and stops scanning as soon as ``limit`` results have been collected.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, TypeVar

from .matcher import matches
from .operators_memory import build_default_registry

if TYPE_CHECKING:
    from .criteria import Specification
    from .evaluator import MemoryOperatorRegistry
    from .query_options import QueryOptions

T = TypeVar("T")

logger = logging.getLogger("gather.executor")


def select(
    collection: Iterable[T] | None,
    specification: Specification,
    limit: int = 0,
    skip: int = 0,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> list[T] | None:
    """
    Return the items of *collection* that satisfy *specification*.

    Args:
        collection: Items to scan, in iteration order. ``None`` is not the
            same as an empty collection: it yields ``None`` instead of ``[]``.
        specification: The criteria to apply.
        limit: Stop once this many results are collected; ``<= 0`` is unbounded.
        skip: Discard this many *matching* items first; ``<= 0`` skips nothing.
        registry: Evaluators to use; defaults to the built-in set.

    Raises:
        AttributeAccessError: An attribute exists on an item but cannot be read.
            No partial result is returned.
    """
    if collection is None:
        return None

    if registry is None:
        registry = build_default_registry()

    results: list[T] = []
    skipped = 0
    for item in collection:
        if not matches(item, specification, registry):
            continue

        # skip elements asked for
        if skipped < skip:
            skipped += 1
            continue

        results.append(item)

        # break if we have accumulated enough results
        if limit > 0 and len(results) >= limit:
            logger.debug("Limit of %d results reached, stopping scan", limit)
            break

    logger.debug(
        "Selected %d item(s) with %d criteria (skip=%d, limit=%d)",
        len(results),
        len(specification.criteria),
        skip,
        limit,
    )
    return results


def select_with_options(
    collection: Iterable[T] | None,
    options: QueryOptions,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> list[T] | None:
    """Run :func:`select` with the parameters bundled in *options*."""
    return select(
        collection,
        options.specification,
        limit=options.limit,
        skip=options.skip,
        registry=registry,
    )


def select_first(
    collection: Iterable[T] | None,
    specification: Specification,
    *,
    registry: MemoryOperatorRegistry | None = None,
) -> T | None:
    """Return the first matching item, or ``None`` if nothing matches."""
    results = select(collection, specification, limit=1, registry=registry)
    if not results:
        return None
    return results[0]
