"""Tests for the immutable criteria model and its dict / JSON form."""

from __future__ import annotations

import json
import re

import pytest
from pydantic import ValidationError as PydanticValidationError

from gather import (
    GatherCriteria,
    GatherOperation,
    JoinKind,
    OperatorNotFoundError,
    Specification,
    ValidationError,
    select,
)


def test_criteria_defaults():
    criteria = GatherCriteria(attribute="age", operation=GatherOperation.IS_NULL)
    assert criteria.value is None
    assert criteria.join is JoinKind.OR
    assert criteria.inverse is False


def test_criteria_requires_attribute_name():
    with pytest.raises(PydanticValidationError):
        GatherCriteria(attribute="", operation=GatherOperation.EQUALS, value=1)


@pytest.mark.parametrize("value", ["(", None, 5, re.compile(b"x")])
def test_criteria_rejects_unusable_regex(value):
    with pytest.raises(PydanticValidationError):
        GatherCriteria(attribute="a", operation=GatherOperation.REGEX_MATCH, value=value)


def test_criteria_accepts_text_regex():
    for value in (r"\d+", re.compile("x", re.IGNORECASE)):
        criteria = GatherCriteria(
            attribute="a", operation=GatherOperation.REGEX_MATCH, value=value
        )
        assert criteria.value is value


def test_criteria_is_frozen():
    criteria = GatherCriteria(attribute="a", operation=GatherOperation.EQUALS, value=1)
    with pytest.raises(PydanticValidationError):
        criteria.value = 2


def test_specification_is_frozen_and_appends_by_copy():
    empty = Specification()
    criteria = GatherCriteria(attribute="a", operation=GatherOperation.EQUALS, value=1)
    spec = empty.with_criteria(criteria)
    assert empty.is_empty is True
    assert spec.criteria == (criteria,)
    with pytest.raises(PydanticValidationError):
        spec.criteria = ()


def test_end_to_end_records():
    records = [{"name": "a", "age": 30}, {"name": "b", "age": 25}, {"name": "c", "age": 40}]
    spec = Specification.from_dict(
        {"criteria": [{"attr": "age", "op": "greater_than", "val": 28}]}
    )
    assert select(records, spec) == [records[0], records[2]]


# -- serialisation -----------------------------------------------------------


def test_to_dict():
    spec = Specification(
        criteria=(
            GatherCriteria(attribute="name", operation=GatherOperation.EQUALS, value="a"),
            GatherCriteria(
                attribute="email",
                operation=GatherOperation.REGEX_MATCH,
                value=re.compile(r".+@x\.com"),
                join=JoinKind.AND,
                inverse=True,
            ),
        )
    )
    assert spec.to_dict() == {
        "criteria": [
            {"attr": "name", "op": "equals", "val": "a", "join": "or", "inverse": False},
            {
                "attr": "email",
                "op": "regex_match",
                "val": r".+@x\.com",
                "join": "and",
                "inverse": True,
            },
        ]
    }


def test_from_dict_defaults_and_case():
    spec = Specification.from_dict(
        {"criteria": [{"attr": "age", "op": "LESS_THAN", "val": 3, "join": "AND"}]}
    )
    (criteria,) = spec.criteria
    assert criteria.operation is GatherOperation.LESS_THAN
    assert criteria.join is JoinKind.AND
    assert criteria.inverse is False


def test_from_dict_without_criteria_is_empty():
    assert Specification.from_dict({}).is_empty is True


def test_from_json_round_trip():
    data = {
        "criteria": [
            {"attr": "name", "op": "wildcard_match", "val": "s*", "join": "or", "inverse": False},
            {"attr": "age", "op": "in", "val": [1, 2], "join": "and", "inverse": True},
        ]
    }
    spec = Specification.from_json(json.dumps(data))
    assert spec.to_dict() == data


def test_from_json_invalid_text():
    with pytest.raises(ValidationError) as exc_info:
        Specification.from_json("{not json")
    assert exc_info.value.path == "<root>"


def test_from_json_requires_object():
    with pytest.raises(ValidationError, match="Expected a dict"):
        Specification.from_json("[1, 2]")


@pytest.mark.parametrize(
    ("node", "message"),
    [
        ("oops", "Expected a dict"),
        ({"op": "equals", "val": 1}, "missing 'attr'"),
        ({"attr": "", "op": "equals"}, "missing 'attr'"),
        ({"attr": "a"}, "'op'"),
        ({"attr": "a", "op": "equals", "join": "xor"}, "'join'"),
        ({"attr": "a", "op": "equals", "inverse": "yes"}, "'inverse'"),
    ],
)
def test_from_dict_rejects_malformed_nodes(node, message):
    with pytest.raises(ValidationError, match=message) as exc_info:
        Specification.from_dict({"criteria": [{"attr": "ok", "op": "is_null"}, node]})
    assert exc_info.value.path == "<root>.criteria[1]"


def test_from_dict_rejects_non_list_criteria():
    with pytest.raises(ValidationError, match="must be a list"):
        Specification.from_dict({"criteria": {"attr": "a"}})


def test_from_dict_unknown_operation_suggests():
    with pytest.raises(OperatorNotFoundError) as exc_info:
        Specification.from_dict({"criteria": [{"attr": "a", "op": "equal"}]})
    assert "equals" in exc_info.value.suggestions


def test_validate_dict_collects_all_errors():
    errors = Specification.validate_dict(
        {
            "criteria": [
                {"attr": "a", "op": "equals"},
                {"op": "equals"},
                {"attr": "b", "op": "greter_than"},
            ]
        }
    )
    assert len(errors) == 2
    assert errors[0].startswith("<root>.criteria[1]:")
    assert errors[1] == "<root>.criteria[2]: unknown operation 'greter_than'"


def test_validate_dict_valid_and_root_errors():
    assert Specification.validate_dict({"criteria": []}) == []
    assert Specification.validate_dict("x") == ["<root>: Expected a dict, got str"]


@pytest.mark.parametrize(
    ("val", "message"),
    [
        ("(", "Invalid regular expression"),
        (None, "must be a string"),
        (42, "must be a string"),
    ],
)
def test_from_dict_rejects_unusable_regex(val, message):
    data = {"criteria": [{"attr": "name", "op": "regex_match", "val": val}]}
    with pytest.raises(ValidationError, match=message) as exc_info:
        Specification.from_dict(data)
    assert exc_info.value.path == "<root>.criteria[0]"


def test_from_json_rejects_invalid_regex_before_matching():
    text = json.dumps({"criteria": [{"attr": "name", "op": "REGEX_MATCH", "val": "("}]})
    with pytest.raises(ValidationError, match="Invalid regular expression"):
        Specification.from_json(text)


def test_validate_dict_reports_invalid_regex():
    errors = Specification.validate_dict(
        {"criteria": [{"attr": "name", "op": "regex_match", "val": "a(b"}]}
    )
    assert len(errors) == 1
    assert errors[0].startswith("<root>.criteria[0]: Invalid regular expression")


def test_valid_regex_from_dict_matches():
    spec = Specification.from_dict(
        {"criteria": [{"attr": "name", "op": "regex_match", "val": r"x\d"}]}
    )
    assert select([{"name": "x1"}, {"name": "x"}], spec) == [{"name": "x1"}]
