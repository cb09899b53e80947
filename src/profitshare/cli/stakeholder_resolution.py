"""CLI helpers for stakeholder resolution."""

from __future__ import annotations

import click
from profitshare.cli.error_handling import handle_domain_error
from profitshare.domain.stakeholder import StakeholderService
from profitshare.utils.stakeholder_resolver import resolve_stakeholder


def resolve_stakeholder_or_exit(
    ctx: click.Context, stakeholder_service: StakeholderService, stakeholder: str | int
) -> int:
    """Resolve stakeholder name or ID, or exit with a CLI error."""
    try:
        return resolve_stakeholder(stakeholder_service, stakeholder)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
