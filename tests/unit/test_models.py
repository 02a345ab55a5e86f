"""Unit tests for filter and event models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from webql.models import Event, EventKind, Filter, Operation
from webql.query import Key


class TestOperation:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("=", Operation.EQUAL),
            ("==", Operation.EQUAL),
            ("Equal", Operation.EQUAL),
            ("!=", Operation.NOT_EQUAL),
            ("ne", Operation.NOT_EQUAL),
            ("~", Operation.CONTAINS),
            ("CONTAINS", Operation.CONTAINS),
            (">", Operation.GREATER_THAN),
            ("greater_than", Operation.GREATER_THAN),
            ("<", Operation.LOWER_THAN),
            (" lt ", Operation.LOWER_THAN),
        ],
    )
    def test_parse(self, raw, expected):
        assert Operation.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["like", "", None, 1])
    def test_parse_unknown(self, raw):
        with pytest.raises(ValueError):
            Operation.parse(raw)


class TestFilter:
    def test_from_mapping(self):
        item = Filter.model_validate(
            {"query": '"user"."login"', "operation": "=", "values": ["kaplanelad"]}
        )
        assert item.operation is Operation.EQUAL
        assert item.values == ["kaplanelad"]

    def test_values_are_stringified(self):
        item = Filter(query='"age"', operation=">", values=[18, 2.5, True, None])
        assert item.values == ["18", "2.5", "true", "null"]

    def test_bare_value(self):
        assert Filter(query='"a"', operation="=", values="x").values == ["x"]

    def test_empty_values_rejected(self):
        with pytest.raises(ValidationError):
            Filter(query='"a"', operation="=", values=[])

    def test_unknown_operation_rejected(self):
        with pytest.raises(ValidationError):
            Filter(query='"a"', operation="like", values=["x"])

    def test_nested_values_rejected(self):
        with pytest.raises(ValidationError):
            Filter(query='"a"', operation="=", values=[["x"]])

    def test_construction_does_not_parse_query(self):
        item = Filter(query='"broken', operation="=", values=["x"])
        assert item.query == '"broken'

    def test_path(self):
        item = Filter(query='"user"."login"', operation="=", values=["x"])
        assert item.path.steps == (Key("user"), Key("login"))

    def test_frozen(self):
        item = Filter(query='"a"', operation="=", values=["x"])
        with pytest.raises(ValidationError):
            item.query = '"b"'

    def test_str(self):
        item = Filter(query='"a"', operation="~", values=["x"])
        assert str(item) == "\"a\" ~ ['x']"


def test_event_dump():
    event = Event(
        kind=EventKind.PR,
        id="1",
        name="pr 1",
        link="https://github.com/o/r/pull/1",
        date=datetime(2022, 1, 1, tzinfo=timezone.utc),
        priority=2,
        raw_data={"number": 1},
    )
    dumped = event.model_dump(mode="json")
    assert dumped["kind"] == "pr"
    assert dumped["parent_event_id"] is None
    assert dumped["date"].startswith("2022-01-01T00:00:00")
    assert dumped["raw_data"] == {"number": 1}
