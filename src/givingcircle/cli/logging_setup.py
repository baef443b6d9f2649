"""Logging configuration for the CLI."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging; DEBUG when verbose, otherwise WARNING."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)
    if verbose:
        logging.getLogger("givingcircle").setLevel(logging.DEBUG)
