"""Filter command - keep NDJSON records that match every filter."""

import click

from ...errors import WebqlError
from ...filtering import matches_all
from ...query import parse_query
from ..helpers import collect_filters, fail, read_ndjson, write_ndjson


@click.command()
@click.argument("input", type=click.File("r"), default="-")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML or JSON file with a list of filters",
)
@click.option("-q", "--query", help="Path query of an inline filter")
@click.option("-o", "--operation", help="Operation of an inline filter (=, !=, ~, >, <)")
@click.option(
    "-v",
    "--value",
    "values",
    multiple=True,
    help="Value of an inline filter (repeat for OR)",
)
def filter(input, config, query, operation, values):
    """Write the NDJSON records that match all filters.

    Filters come from --config, plus one inline filter built from
    --query/--operation/--value. With no filters every record passes.

    Examples:
        # Records whose user login is kaplanelad
        webql filter -q '"user"."login"' -o = -v kaplanelad < prs.ndjson

        # Records with a label containing "bug" or "fix"
        webql filter -q '"labels"|={"name"}."name"' -o '~' -v bug -v fix prs.ndjson

        # Filters from a file
        webql filter --config filters.yaml prs.ndjson
    """
    filters = collect_filters(config, query, operation, values)

    try:
        # Fail before reading input when a query is malformed
        for item in filters:
            parse_query(item.query)
        for record in read_ndjson(input):
            if matches_all(record, filters):
                write_ndjson(record)
    except WebqlError as e:
        fail(str(e))
