from __future__ import annotations

import logging
import sys

LOGGER_NAME = "hashtodo"


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Send hashtodo's log records to stderr at ``level``.

    Task output goes to stdout, so diagnostics never end up in a listing that
    is piped elsewhere. Handlers from a previous call are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)
