"""Logging setup for the webql CLI."""

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool) -> None:
    """Send webql log records to stderr.

    DEBUG when debug is set, WARNING otherwise. Only the CLI calls this;
    the library never installs handlers.
    """
    logger = logging.getLogger("webql")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
