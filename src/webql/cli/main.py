"""webql CLI main entry point with global options."""

import click

from ..context import configure_logging


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Log diagnostics to stderr")
def cli(debug):
    """webql - filter JSON documents with path queries."""
    configure_logging(debug)


# Register commands at module level so tests can import cli with commands attached
from .commands.explain import explain
from .commands.filter import filter
from .commands.github import github
from .commands.query import query

cli.add_command(filter)
cli.add_command(query)
cli.add_command(explain)
cli.add_command(github)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
