"""Pytest configuration and shared fixtures."""

import json
import logging

import pytest
from click.testing import CliRunner

from webql.cli.main import cli


@pytest.fixture(autouse=True)
def reset_webql_logger():
    """Drop handlers the CLI installs on the webql logger.

    configure_logging() binds a handler to the runner's stderr, which is
    closed once the invocation returns. Leaving it attached would make log
    calls in later tests write to a dead stream.
    """
    yield
    logger = logging.getLogger("webql")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["query", '"name"'], input_data='{"name": "x"}\\n')
    """

    def _invoke(args, input_data=None, env=None):
        return cli_runner.invoke(cli, args, input=input_data, env=env)

    return _invoke


@pytest.fixture
def pull_request():
    """A trimmed pull-request document."""
    return {
        "url": "https://github.com/rusty-ferris-club/webql",
        "body": "some example",
        "labels": [
            {"name": "label-1"},
            {"name": "label-2"},
        ],
        "user": {"login": "kaplanelad"},
    }


@pytest.fixture
def people():
    return [
        {"name": "Alice", "age": 30, "tags": ["admin", "dev"]},
        {"name": "Bob", "age": 25, "tags": ["dev"]},
        {"name": "Carol", "age": "unknown", "tags": []},
    ]


@pytest.fixture
def people_ndjson(people):
    """Provide the people records as NDJSON."""
    return "".join(json.dumps(person) + "\n" for person in people)
