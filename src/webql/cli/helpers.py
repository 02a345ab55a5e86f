"""CLI helper utilities shared across commands."""

import json
import sys
from typing import Any, Iterator, List, Optional, Tuple

import click

from ..config import load_filters
from ..errors import WebqlError
from ..models.filter import Filter


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def read_ndjson(stream) -> Iterator[Any]:
    """Yield decoded records from an NDJSON stream, skipping blank lines.

    Exits with status 1 on the first line that is not valid JSON.
    """
    for lineno, line in enumerate(stream, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError as e:
            fail(f"Invalid JSON on line {lineno}: {e.msg}")


def write_ndjson(record: Any) -> None:
    click.echo(json.dumps(record, ensure_ascii=False, default=str))


def collect_filters(
    config: Optional[str],
    query: Optional[str],
    operation: Optional[str],
    values: Tuple[str, ...],
) -> List[Filter]:
    """Build the filter list from a config file plus one inline filter.

    The inline filter needs all of --query, --operation and --value.
    """
    filters: List[Filter] = []
    try:
        if config:
            filters.extend(load_filters(config))
    except WebqlError as e:
        fail(str(e))

    inline = [query, operation, values or None]
    if any(part is not None for part in inline):
        if not all(part is not None for part in inline):
            fail("--query, --operation and --value must be given together")
        try:
            filters.append(Filter(query=query, operation=operation, values=list(values)))
        except ValueError as e:
            fail(f"Invalid filter: {e}")

    return filters
