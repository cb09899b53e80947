"""Seed command."""

from datetime import date, datetime, timedelta
from decimal import Decimal

import click
from dateutil.relativedelta import relativedelta
from profitshare.domain.entities import TransactionType
from profitshare.domain.stakeholder import DEFAULT_STAKEHOLDERS, StakeholderService
from profitshare.domain.transaction import TransactionService


def sample_transactions(today: date) -> list[tuple[TransactionType, Decimal, datetime, str]]:
    """Sample profit/cost pairs for the two months before ``today``."""
    last_month = datetime(today.year, today.month, 15) - relativedelta(months=1)
    two_months_ago = datetime(today.year, today.month, 10) - relativedelta(months=2)
    return [
        (TransactionType.PROFIT, Decimal("5000"), last_month, "Client A project revenue"),
        (TransactionType.COST, Decimal("1200"), last_month + timedelta(days=5), "Office rent"),
        (TransactionType.PROFIT, Decimal("3500"), two_months_ago, "Consulting services"),
        (TransactionType.COST, Decimal("800"), two_months_ago + timedelta(days=5), "Software subscriptions"),
    ]


@click.command("seed")
@click.pass_context
def seed(ctx):
    """Add default stakeholders and sample transactions to an empty database.

    Stakeholders are only added when none exist, and sample transactions
    only when there are no transactions yet.
    """
    db = ctx.obj["db"]
    stakeholder_service = StakeholderService(db)
    transaction_service = TransactionService(db)

    created = stakeholder_service.seed_default_stakeholders()
    if created:
        click.echo(f"Added default stakeholders: {', '.join(DEFAULT_STAKEHOLDERS)}")
    else:
        count = len(stakeholder_service.list_stakeholders())
        click.echo(f"Found {count} existing stakeholder(s). Skipping default stakeholders.")

    count = db.count_transactions()
    if count > 0:
        click.echo(f"Found {count} existing transaction(s). Skipping sample transactions.")
        return

    for txn_type, amount, txn_date, description in sample_transactions(date.today()):
        transaction_service.create_transaction(
            type=txn_type, amount=amount, date=txn_date, description=description
        )
    click.echo("Added sample transactions.")


def register_commands(cli):
    """Register seed command with main CLI."""
    cli.add_command(seed)
