"""
Pattern and membership helpers used by the in-memory evaluators.

These are pure-Python helpers with no dependency on the rest of the package.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Mapping
from typing import Any

# ---------------------------------------------------------------------------
# Wildcard patterns
# ---------------------------------------------------------------------------


def wildcard_to_regex(pattern: str) -> str:
    """
    Translate a shell-style wildcard into an anchored regular expression.

    ``*`` matches any run of characters (including none), ``?`` matches
    exactly one character, and everything else is matched literally.

    >>> wildcard_to_regex("a*c?")
    '\\\\Aa.*c.\\\\Z'
    """
    fragments: list[str] = []
    for char in pattern:
        if char == "*":
            fragments.append(".*")
        elif char == "?":
            fragments.append(".")
        else:
            fragments.append(re.escape(char))
    return r"\A" + "".join(fragments) + r"\Z"


def wildcard_match(value: str, pattern: str) -> bool:
    """Return ``True`` if the whole of *value* matches wildcard *pattern*."""
    return re.match(wildcard_to_regex(pattern), value, re.DOTALL) is not None


# ---------------------------------------------------------------------------
# Regular expressions
# ---------------------------------------------------------------------------


def regex_match(value: str, pattern: str | re.Pattern[str]) -> bool:
    """
    Return ``True`` if the whole of *value* matches *pattern*.

    *pattern* may be precompiled; a raw string is compiled on each call.
    """
    compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
    return compiled.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Membership
# ---------------------------------------------------------------------------


def is_value_collection(value: Any) -> bool:
    """
    Return ``True`` for collections usable as a membership operand.

    Strings, bytes and mappings are collections in Python but not lists of
    candidate values, so they are rejected.
    """
    if isinstance(value, str | bytes | bytearray | Mapping):
        return False
    return isinstance(value, Collection)


def contains(values: Any, value: Any) -> bool:
    """Return ``True`` if *value* is equal to any element of *values*."""
    if not is_value_collection(values) or not values:
        return False
    try:
        return value in values
    except TypeError:
        # unhashable value probed against a set
        return any(value == candidate for candidate in values)
