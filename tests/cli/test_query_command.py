"""Tests for the query command."""

import json


def test_resolves_per_record(invoke):
    data = '{"user": {"login": "octocat"}}\n{"user": {}}\n\n{"user": {"login": "hubot"}}\n'
    res = invoke(["query", '"user"."login"'], input_data=data)
    assert res.exit_code == 0
    assert [json.loads(line) for line in res.output.splitlines()] == [
        ["octocat"],
        [],
        ["hubot"],
    ]


def test_aggregate(invoke, pull_request):
    res = invoke(
        ["query", '"labels"|={"name"}."name"'],
        input_data=json.dumps(pull_request) + "\n",
    )
    assert res.exit_code == 0
    assert json.loads(res.output) == ["label-1", "label-2"]


def test_malformed_query(invoke):
    res = invoke(["query", '"labels"|={}'], input_data="{}\n")
    assert res.exit_code == 1
    assert "aggregate shape cannot be empty" in res.output
