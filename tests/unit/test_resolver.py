"""Unit tests for path query resolution."""

import copy

import pytest

from webql.errors import QueryParseError
from webql.query import parse_query, resolve


def test_nested_value():
    assert resolve({"a": {"b": 5}}, '"a"."b"') == [5]


def test_missing_key_is_empty():
    assert resolve({"a": {"b": 5}}, '"a"."missing"') == []


def test_unbalanced_quote_raises():
    with pytest.raises(QueryParseError):
        resolve({"a": 1}, '"a')


def test_key_on_non_object_is_empty():
    assert resolve({"a": 5}, '"a"."b"') == []
    assert resolve({"a": [1, 2]}, '"a"."b"') == []
    assert resolve("text", '"a"') == []


def test_null_value_is_resolved():
    assert resolve({"a": None}, '"a"') == [None]


def test_array_value_is_returned_whole():
    assert resolve({"tags": ["a", "b"]}, '"tags"') == [["a", "b"]]


def test_key_containing_dot():
    assert resolve({"a.b": 1, "a": {"b": 2}}, '"a.b"') == [1]


def test_accepts_parsed_query():
    query = parse_query('"user"."login"')
    assert resolve({"user": {"login": "octocat"}}, query) == ["octocat"]


class TestAggregate:
    def test_selects_elements_with_field(self):
        doc = {"labels": [{"name": "x"}, {"other": "y"}]}
        assert resolve(doc, '"labels"|={"name"}."name"') == ["x"]

    def test_all_shape_fields_required(self):
        doc = {
            "items": [
                {"id": 1, "name": "a"},
                {"id": 2},
                {"name": "c"},
                {"id": 4, "name": "d", "extra": True},
            ]
        }
        assert resolve(doc, '"items"|={"id","name"}."id"') == [1, 4]

    def test_without_trailing_steps_returns_elements(self):
        doc = {"items": [{"id": 1}, {"x": 2}, {"id": 3}]}
        assert resolve(doc, '"items"|={"id"}') == [{"id": 1}, {"id": 3}]

    def test_non_object_elements_dropped(self):
        doc = {"items": ["id", 1, None, ["id"], {"id": 7}]}
        assert resolve(doc, '"items"|={"id"}."id"') == [7]

    def test_on_non_array_is_empty(self):
        assert resolve({"items": {"id": 1}}, '"items"|={"id"}."id"') == []
        assert resolve({"items": "id"}, '"items"|={"id"}') == []

    def test_empty_array(self):
        assert resolve({"items": []}, '"items"|={"id"}."id"') == []

    def test_fan_out_keeps_array_order(self):
        doc = {
            "a": [
                {"b": {"c": 1}},
                {"x": 0},
                {"b": {"c": 2}},
                {"b": {"d": 3}},
                {"b": {"c": 3}},
            ]
        }
        assert resolve(doc, '"a"|={"b"}."b"."c"') == [1, 2, 3]

    def test_branch_values_may_be_null(self):
        doc = {"labels": [{"name": None}, {"name": "x"}]}
        assert resolve(doc, '"labels"|={"name"}."name"') == [None, "x"]


def test_idempotent():
    doc = {"labels": [{"name": "x"}, {"name": "y"}]}
    query = '"labels"|={"name"}."name"'
    assert resolve(doc, query) == resolve(doc, query)


def test_does_not_mutate_document():
    doc = {"labels": [{"name": "x"}, {"other": "y"}], "user": {"login": "a"}}
    before = copy.deepcopy(doc)
    resolve(doc, '"labels"|={"name"}."name"')
    resolve(doc, '"user"."login"')
    assert doc == before
