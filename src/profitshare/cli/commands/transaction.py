"""Transaction management commands."""

import click
from profitshare.cli.date_filters import period_flags_from, period_options, resolve_cli_date_range
from profitshare.cli.error_handling import handle_domain_error
from profitshare.domain.entities import TransactionType
from profitshare.domain.transaction import TransactionService
from profitshare.utils.amount_parser import parse_amount
from profitshare.utils.date_parser import parse_datetime
from profitshare.utils.formatting import format_currency, format_timestamp

TYPE_CHOICE = click.Choice([t.value for t in TransactionType], case_sensitive=False)


@click.group()
def transaction_group():
    """Manage profit and cost transactions."""
    pass


@transaction_group.command("add")
@click.option("--type", "txn_type", type=TYPE_CHOICE, required=True, help="Transaction type")
@click.option("--amount", required=True, help="Positive amount (e.g., 123.45 or $1,234.56)")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD, 'YYYY-MM-DD HH:MM' or relative like 'yesterday')",
)
@click.option("--description", required=True, help="Transaction description")
@click.pass_context
def add_transaction(ctx, txn_type: str, amount: str, date: str, description: str):
    """Add a transaction.

    Examples:
        profitshare transaction add --type profit --amount 5000 --date 2024-03-15 --description "Consulting"
        profitshare transaction add --type cost --amount 1200 --description "Hosting"
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        txn_date = parse_datetime(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        transaction_id = service.create_transaction(
            type=txn_type, amount=txn_amount, date=txn_date, description=description
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created {txn_type.lower()} transaction {transaction_id} for {format_currency(txn_amount)}")


@transaction_group.command("list")
@period_options
@click.option("--type", "txn_type", type=TYPE_CHOICE, help="Show only profit or cost transactions")
@click.pass_context
def list_transactions(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    this_year: bool,
    this_week: bool,
    last_month: bool,
    last_year: bool,
    last_week: bool,
    txn_type: str | None,
):
    """List transactions, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags_from(
            this_month=this_month,
            this_year=this_year,
            this_week=this_week,
            last_month=last_month,
            last_year=last_year,
            last_week=last_week,
        ),
    )

    transactions = service.list_transactions(start_date=start, end_date=end, type=txn_type)
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 90)
    click.echo(f"{'ID':<6} {'Date':<18} {'Type':<8} {'Amount':>14}  {'Description':<40}")
    click.echo("-" * 90)

    for txn in transactions:
        description = txn.description[:40]
        click.echo(
            f"{txn.id:<6} {format_timestamp(txn.date):<18} {txn.type.value:<8} "
            f"{format_currency(txn.amount):>14}  {description:<40}"
        )

    total_profit = sum(txn.amount for txn in transactions if txn.type == TransactionType.PROFIT)
    total_cost = sum(txn.amount for txn in transactions if txn.type == TransactionType.COST)
    click.echo("-" * 90)
    click.echo(
        f"{'TOTAL':<6} Profit: {format_currency(total_profit)} | "
        f"Cost: {format_currency(total_cost)} | Count: {len(transactions)}"
    )


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_transaction(ctx, transaction_id: int):
    """Show a single transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        txn = service.require_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nTransaction ID: {txn.id}")
    click.echo(f"  Type: {txn.type.value}")
    click.echo(f"  Date: {format_timestamp(txn.date)}")
    click.echo(f"  Amount: {format_currency(txn.amount)}")
    click.echo(f"  Description: {txn.description}")
    if txn.created_at:
        click.echo(f"  Created: {txn.created_at}")


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--type", "txn_type", type=TYPE_CHOICE, help="Transaction type")
@click.option("--amount", help="Positive amount")
@click.option("--date", help="Transaction date")
@click.option("--description", help="Transaction description")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    txn_type: str | None,
    amount: str | None,
    date: str | None,
    description: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided.

    Examples:
        profitshare transaction update 1 --amount 4500
        profitshare transaction update 1 --type cost --date 2024-03-02
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    txn_date = None
    if date is not None:
        try:
            txn_date = parse_datetime(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    txn_amount = None
    if amount is not None:
        try:
            txn_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_transaction(
            transaction_id=transaction_id,
            type=txn_type,
            amount=txn_amount,
            date=txn_date,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.pass_context
def delete_transaction(ctx, transaction_id: int) -> None:
    """Delete a transaction.

    Examples:
        profitshare transaction delete 1
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if not click.confirm(f"Are you sure you want to delete transaction {transaction_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
