"""Shared fixtures for gather tests."""

from __future__ import annotations

from typing import Any

import pytest

from gather.operators_memory import build_default_registry


@pytest.fixture
def registry():
    """Default in-memory operator registry."""
    return build_default_registry()


@pytest.fixture
def people() -> list[dict[str, Any]]:
    """Plain mapping records; test modules declare their own object models."""
    return [
        {"name": "a", "age": 30, "email": "a@example.com"},
        {"name": "b", "age": 25, "email": None},
        {"name": "c", "age": 40, "email": "c@example.org"},
    ]
