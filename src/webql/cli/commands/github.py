"""GitHub command - fetch pull-request events and print them as NDJSON."""

import click

from ...config import GITHUB_HOST_ENV, GITHUB_TOKEN_ENV, load_github_config
from ...errors import WebqlError
from ...vendor.github import GitHub
from ..helpers import fail, write_ndjson


@click.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-m",
    "--minutes-ago",
    type=click.IntRange(min=0),
    default=24 * 60,
    show_default=True,
    help="Only fetch activity newer than this many minutes",
)
@click.option("--host", envvar=GITHUB_HOST_ENV, help="GitHub API host")
@click.option("--token", envvar=GITHUB_TOKEN_ENV, help="GitHub API token")
def github(config, minutes_ago, host, token):
    """Fetch events for the pull requests selected by CONFIG.

    CONFIG lists repositories and the filters their pull requests must
    match:

    \b
        repositories:
          pull_request:
            - owner: rusty-ferris-club
              repo: webql
              priority: 1
              filters:
                - query: '"labels"|={"name"}."name"'
                  operation: '~'
                  values: [enhancement]
    """
    try:
        github_config = load_github_config(config)
        source = GitHub.from_env(host=host, token=token)
        events = source.get_events(github_config, minutes_ago)
    except WebqlError as e:
        fail(str(e))

    for event in events:
        write_ndjson(event.model_dump(mode="json"))
