"""Explain command - show how each filter scored each record."""

import click

from ...errors import WebqlError
from ...filtering import explain as explain_filter
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
@click.option("-o", "--operation", help="Operation of an inline filter")
@click.option("-v", "--value", "values", multiple=True, help="Value of an inline filter")
def explain(input, config, query, operation, values):
    """Print one diagnostic record per input record and filter.

    Each line carries the record index, the filter, the values the query
    resolved to, whether it matched and any comparisons that were not
    possible (for example '>' against text).
    """
    filters = collect_filters(config, query, operation, values)
    if not filters:
        fail("no filters given")

    try:
        for index, record in enumerate(read_ndjson(input)):
            for item in filters:
                outcome = explain_filter(record, item)
                write_ndjson(
                    {
                        "record": index,
                        "query": item.query,
                        "operation": item.operation.value,
                        "values": item.values,
                        "resolved": outcome.values,
                        "matched": outcome.matched,
                        "unsupported": outcome.unsupported,
                    }
                )
    except WebqlError as e:
        fail(str(e))
