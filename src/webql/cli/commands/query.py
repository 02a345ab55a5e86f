"""Query command - print the values a path query resolves to."""

import click

from ...errors import WebqlError
from ...query import parse_query, resolve
from ..helpers import fail, read_ndjson, write_ndjson


@click.command()
@click.argument("path_query", metavar="QUERY")
@click.argument("input", type=click.File("r"), default="-")
def query(path_query, input):
    """Print, per NDJSON record, the JSON array of values QUERY resolves to.

    Examples:
        echo '{"user": {"login": "octocat"}}' | webql query '"user"."login"'
        ["octocat"]
    """
    try:
        path = parse_query(path_query)
    except WebqlError as e:
        fail(str(e))

    for record in read_ndjson(input):
        write_ndjson(resolve(record, path))
