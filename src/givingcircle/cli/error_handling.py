"""CLI error handling helpers."""

import logging
from typing import NoReturn

import click

from givingcircle.domain.errors import DomainError

logger = logging.getLogger(__name__)


def exit_with_error(ctx: click.Context, message: str) -> NoReturn:
    """Print an error message and exit with failure."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def handle_domain_error(ctx: click.Context, error: DomainError) -> NoReturn:
    """Exit with failure after a domain error.

    The store has already sent the failure notice to the CLI notification
    sink, which printed it, so the error is only logged here.
    """
    logger.debug("%s in %s: %s", type(error).__name__, ctx.info_name, error)
    ctx.exit(1)
