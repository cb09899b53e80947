"""Summary command."""

import json

import click
from profitshare.cli.date_filters import period_flags_from, period_options, resolve_cli_date_range
from profitshare.cli.error_handling import handle_domain_error
from profitshare.domain.entities import FinancialSummary
from profitshare.domain.periods import format_period
from profitshare.domain.summary import SummaryService
from profitshare.utils.formatting import format_currency

WIDTH = 80


def _display_totals(summary: FinancialSummary) -> None:
    click.echo("\nFinancial Summary:")
    click.echo("-" * WIDTH)
    click.echo(f"{'Total Profit':<50} {format_currency(summary.total_profit):>20}")
    click.echo(f"{'Total Cost':<50} {format_currency(summary.total_cost):>20}")
    click.echo("-" * WIDTH)
    click.echo(f"{'Net Balance':<50} {format_currency(summary.total_balance):>20}")
    click.echo("=" * WIDTH)


def _display_months(summary: FinancialSummary, names: dict[int, str]) -> None:
    for calc in summary.monthly_calculations:
        click.echo()
        click.echo(format_period(calc.month))
        click.echo("*" * WIDTH)
        click.echo(
            f"    Profit: {format_currency(calc.profit)} | Cost: {format_currency(calc.cost)} | "
            f"Balance: {format_currency(calc.balance)}"
        )
        click.echo(f"    {'Stakeholder':<26} {'Share':>15} {'Paid':>15} {'Remaining':>15}")
        for stakeholder_id, share in calc.stakeholder_shares.items():
            info = calc.stakeholder_payments[stakeholder_id]
            click.echo(
                f"    {names[stakeholder_id]:<26} {format_currency(share):>15} "
                f"{format_currency(info.total_paid):>15} {format_currency(info.remaining):>15}"
            )


def _display_balances(summary: FinancialSummary, names: dict[int, str]) -> None:
    click.echo()
    click.echo("Overall Balances (global payments)")
    click.echo("*" * WIDTH)
    click.echo(f"    {'Stakeholder':<26} {'Total Share':>15} {'Paid':>15} {'Remaining':>15}")
    for stakeholder_id, balance in summary.stakeholder_balances.items():
        click.echo(
            f"    {names[stakeholder_id]:<26} {format_currency(balance.total_share):>15} "
            f"{format_currency(balance.total_paid):>15} {format_currency(balance.remaining):>15}"
        )
    click.echo("=" * WIDTH)


@click.command("summary")
@period_options
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.pass_context
def summary(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    this_year: bool,
    this_week: bool,
    last_month: bool,
    last_year: bool,
    last_week: bool,
    as_json: bool,
):
    """Show monthly shares, payments and remaining balances.

    Each month's net balance is split equally between active stakeholders.
    Monthly payments settle that month's share; global payments settle the
    cumulative share.

    Examples:
        profitshare summary
        profitshare summary --this-year
        profitshare summary --start-date 2024-01-01 --end-date 2024-03-31 --json
    """
    db = ctx.obj["db"]
    service = SummaryService(db)

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

    try:
        result = service.build_summary(start_date=start, end_date=end)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if not result.monthly_calculations:
        click.echo("No transactions found.")
        return

    names = {s.id: s.name for s in result.stakeholders}
    _display_totals(result)
    _display_months(result, names)
    if names:
        _display_balances(result, names)


def register_commands(cli: click.Group) -> None:
    """Register summary command with main CLI."""
    cli.add_command(summary)
