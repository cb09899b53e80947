"""CLI error handling helpers."""

import logging

import click

from profitshare.domain.errors import DomainError, TransientStoreError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Print a domain error to stderr and exit with status 1.

    A busy store gets a hint to retry, since nothing was changed.
    """
    logger.debug("Command %s failed: %r", ctx.info_name, error)
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, TransientStoreError):
        click.echo("The database is busy; no changes were made. Try again shortly.", err=True)
    ctx.exit(1)
