"""
Dynamic attribute access over arbitrary object shapes.

Only instance-level state is considered: mapping keys, entries in the
instance ``__dict__`` (plain objects, dataclasses, pydantic models),
``__slots__`` members declared anywhere in the MRO, named-tuple fields and
pydantic private/extra attributes. Methods, properties and class attributes
are not instance attributes and resolve to :data:`NOT_FOUND`.

Names are matched exactly as declared, so ``"__token"`` finds the
name-mangled ``_Account__token`` of a class ``Account``, and ``"_age"``
reaches a conventionally private attribute.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Final

from .exceptions import AttributeAccessError

_SKIPPED_SLOTS: Final = frozenset({"__dict__", "__weakref__"})


class _NotFound:
    """Marker type for an attribute that does not exist on an object."""

    _instance: _NotFound | None = None

    def __new__(cls) -> _NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Final = _NotFound()
"""Returned when the object has no such attribute (distinct from ``None``)."""


def get_attribute(obj: Any, name: str) -> Any:
    """
    Return the current value of attribute *name* on *obj*.

    Returns:
        The attribute value (possibly ``None``), or :data:`NOT_FOUND` when
        *obj* is ``None`` or has no such instance attribute.

    Raises:
        AttributeAccessError: The attribute is declared on the object but
            reading it failed, e.g. a ``__slots__`` member that was never
            assigned.
    """
    if obj is None:
        return NOT_FOUND

    if isinstance(obj, Mapping):
        return obj[name] if name in obj else NOT_FOUND

    instance_dict = getattr(obj, "__dict__", None)
    if isinstance(instance_dict, dict):
        for stored in _stored_names(type(obj), name):
            if stored in instance_dict:
                return instance_dict[stored]

    value = _read_slot(obj, name)
    if value is not NOT_FOUND:
        return value

    fields = getattr(type(obj), "_fields", None)
    if isinstance(obj, tuple) and isinstance(fields, tuple) and name in fields:
        return obj[fields.index(name)]

    for store in ("__pydantic_private__", "__pydantic_extra__"):
        extra = getattr(obj, store, None)
        if isinstance(extra, dict) and name in extra:
            return extra[name]

    return NOT_FOUND


# -- internals -----------------------------------------------------------------


def _is_private(name: str) -> bool:
    return name.startswith("__") and not name.endswith("__")


def _mangle(owner: type, name: str) -> str:
    stripped = owner.__name__.lstrip("_")
    if not stripped:
        return name
    return f"_{stripped}{name}"


def _stored_names(cls: type, name: str) -> Iterator[str]:
    """Yield every name under which *name* may be stored on an instance."""
    yield name
    if _is_private(name):
        for owner in cls.__mro__:
            yield _mangle(owner, name)


def _declared_slots(owner: type) -> tuple[str, ...]:
    slots = owner.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        return (slots,)
    return tuple(slots)


def _read_slot(obj: Any, name: str) -> Any:
    if name in _SKIPPED_SLOTS:
        return NOT_FOUND

    for owner in type(obj).__mro__:
        if name not in _declared_slots(owner):
            continue
        stored = _mangle(owner, name) if _is_private(name) else name
        descriptor = owner.__dict__.get(stored)
        if descriptor is None or not hasattr(descriptor, "__get__"):
            continue
        try:
            return descriptor.__get__(obj, type(obj))
        except AttributeError as exc:
            raise AttributeAccessError(name, type(obj).__name__) from exc

    return NOT_FOUND
