"""Payment commands."""

import click
from profitshare.cli.error_handling import handle_domain_error
from profitshare.cli.stakeholder_resolution import resolve_stakeholder_or_exit
from profitshare.domain.entities import PaymentKind
from profitshare.domain.payment import PaymentService
from profitshare.domain.stakeholder import StakeholderService
from profitshare.utils.amount_parser import parse_amount
from profitshare.utils.date_parser import parse_datetime, parse_month
from profitshare.utils.formatting import format_currency, format_month, format_timestamp


@click.group()
def payment_group():
    """Record and review stakeholder payments."""
    pass


@payment_group.command("record")
@click.argument("stakeholder", metavar="STAKEHOLDER")
@click.option("--amount", required=True, help="Positive amount paid")
@click.option("--month", help="Month the payment settles (e.g., 2024-3, 'March 2024', 'last month')")
@click.option("--global", "is_global", is_flag=True, help="Settle against the cumulative balance")
@click.option("--date", help="Payment date (defaults to now)")
@click.option("--notes", help="Notes (defaults to 'Payment for <Month Year>' for monthly payments)")
@click.pass_context
def record_payment(
    ctx,
    stakeholder: str,
    amount: str,
    month: str | None,
    is_global: bool,
    date: str | None,
    notes: str | None,
):
    """Record a payment to a stakeholder.

    STAKEHOLDER can be a stakeholder name or ID. Either --month or --global
    is required.

    Examples:
        profitshare payment record "Alice" --amount 900 --month 2024-3
        profitshare payment record 1 --amount 500 --global --notes "Advance"
    """
    if month is None and not is_global:
        click.echo("Error: Specify --month for a monthly payment or --global for a global payment.", err=True)
        ctx.exit(1)

    db = ctx.obj["db"]
    payment_service = PaymentService(db)
    stakeholder_service = StakeholderService(db)
    stakeholder_id = resolve_stakeholder_or_exit(ctx, stakeholder_service, stakeholder)

    period_key = None
    if month is not None:
        try:
            period_key = parse_month(month)
        except ValueError as e:
            click.echo(f"Error: Invalid month: {e}", err=True)
            ctx.exit(1)

    payment_date = None
    if date is not None:
        try:
            payment_date = parse_datetime(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        payment_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        payment_id = payment_service.record_payment(
            stakeholder_id=stakeholder_id,
            amount=payment_amount,
            date=payment_date,
            notes=notes,
            month=period_key,
            is_global_payment=is_global,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    target = "global balance" if is_global or period_key is None else format_month(period_key)
    click.echo(f"Recorded payment {payment_id} of {format_currency(payment_amount)} against {target}")


@payment_group.command("list")
@click.option("--stakeholder", help="Stakeholder name or ID")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in PaymentKind], case_sensitive=False),
    default=PaymentKind.ALL.value,
    show_default=True,
    help="Show all, only global or only monthly payments",
)
@click.pass_context
def list_payments(ctx, stakeholder: str | None, kind: str):
    """List payment history, newest first."""
    db = ctx.obj["db"]
    payment_service = PaymentService(db)
    stakeholder_service = StakeholderService(db)

    stakeholder_id = None
    if stakeholder:
        stakeholder_id = resolve_stakeholder_or_exit(ctx, stakeholder_service, stakeholder)

    try:
        payments = payment_service.list_payments(stakeholder_id=stakeholder_id, kind=kind.lower())
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not payments:
        click.echo("No payments found.")
        return

    names = {sh.id: sh.name for sh in stakeholder_service.list_stakeholders()}

    click.echo(f"\nFound {len(payments)} payment(s):")
    click.echo("-" * 100)
    click.echo(f"{'ID':<6} {'Date':<18} {'Stakeholder':<20} {'Month':<16} {'Amount':>14}  {'Notes':<20}")
    click.echo("-" * 100)
    for p in payments:
        month_label = "Global" if p.is_global else format_month(p.month)
        click.echo(
            f"{p.id:<6} {format_timestamp(p.date):<18} {names.get(p.stakeholder_id, 'Unknown'):<20} "
            f"{month_label:<16} {format_currency(p.amount):>14}  {p.notes[:20]:<20}"
        )

    click.echo("-" * 100)
    total = sum(p.amount for p in payments)
    click.echo(f"{'TOTAL':<6} Paid: {format_currency(total)} | Count: {len(payments)}")


@payment_group.command("delete")
@click.argument("payment_id", type=int)
@click.pass_context
def delete_payment(ctx, payment_id: int) -> None:
    """Delete a payment.

    Examples:
        profitshare payment delete 3
    """
    db = ctx.obj["db"]
    service = PaymentService(db)

    payment = service.get_payment(payment_id)
    if payment is None:
        click.echo(f"Error: Payment {payment_id} not found", err=True)
        ctx.exit(1)

    if not click.confirm(f"Are you sure you want to delete payment {payment_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_payment(payment_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted payment {payment_id}")


def register_commands(cli: click.Group) -> None:
    """Register payment commands with main CLI."""
    cli.add_command(payment_group, name="payment")
