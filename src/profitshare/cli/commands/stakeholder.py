"""Stakeholder management commands."""

import click
from profitshare.cli.error_handling import handle_domain_error
from profitshare.cli.stakeholder_resolution import resolve_stakeholder_or_exit
from profitshare.domain.stakeholder import StakeholderService


@click.group()
def stakeholder_group():
    """Manage stakeholders."""
    pass


@stakeholder_group.command("create")
@click.argument("name", metavar="STAKEHOLDER_NAME")
@click.option("--inactive", is_flag=True, help="Create the stakeholder as inactive")
@click.pass_context
def create_stakeholder(ctx, name: str, inactive: bool):
    """Create a new stakeholder.

    Examples:
        profitshare stakeholder create "Alice"
        profitshare stakeholder create "Bob" --inactive
    """
    db = ctx.obj["db"]
    service = StakeholderService(db)

    try:
        stakeholder_id = service.create_stakeholder(name=name, active=not inactive)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created stakeholder '{name}' (ID: {stakeholder_id})")


@stakeholder_group.command("list")
@click.option("--active-only", is_flag=True, help="Show only active stakeholders")
@click.pass_context
def list_stakeholders(ctx, active_only: bool):
    """List stakeholders."""
    db = ctx.obj["db"]
    service = StakeholderService(db)

    stakeholders = service.list_stakeholders(active_only=active_only)
    if not stakeholders:
        click.echo("No stakeholders found.")
        return

    click.echo("\nStakeholders:")
    click.echo("-" * 60)
    for sh in stakeholders:
        status = "active" if sh.active else "inactive"
        click.echo(f"ID: {sh.id:3d} | {sh.name:30s} | {status}")


@stakeholder_group.command("rename")
@click.argument("stakeholder", metavar="STAKEHOLDER")
@click.argument("new_name", metavar="NEW_NAME")
@click.pass_context
def rename_stakeholder(ctx, stakeholder: str, new_name: str) -> None:
    """Rename a stakeholder.

    STAKEHOLDER can be a stakeholder name or ID.

    Examples:
        profitshare stakeholder rename "Stakeholder 1" "Alice"
        profitshare stakeholder rename 2 "Bob"
    """
    db = ctx.obj["db"]
    service = StakeholderService(db)
    stakeholder_id = resolve_stakeholder_or_exit(ctx, service, stakeholder)

    try:
        service.rename_stakeholder(stakeholder_id, new_name)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Renamed stakeholder to '{new_name}'")


def _set_active(ctx, stakeholder: str, active: bool) -> None:
    db = ctx.obj["db"]
    service = StakeholderService(db)
    stakeholder_id = resolve_stakeholder_or_exit(ctx, service, stakeholder)

    try:
        service.set_active(stakeholder_id, active)
    except ValueError as e:
        handle_domain_error(ctx, e)
    sh = service.require_stakeholder(stakeholder_id)
    click.echo(f"{'Activated' if active else 'Deactivated'} stakeholder '{sh.name}'")


@stakeholder_group.command("activate")
@click.argument("stakeholder", metavar="STAKEHOLDER")
@click.pass_context
def activate_stakeholder(ctx, stakeholder: str) -> None:
    """Include a stakeholder in future splits."""
    _set_active(ctx, stakeholder, True)


@stakeholder_group.command("deactivate")
@click.argument("stakeholder", metavar="STAKEHOLDER")
@click.pass_context
def deactivate_stakeholder(ctx, stakeholder: str) -> None:
    """Exclude a stakeholder from splits while keeping their payment history."""
    _set_active(ctx, stakeholder, False)


@stakeholder_group.command("delete")
@click.argument("stakeholder", metavar="STAKEHOLDER")
@click.pass_context
def delete_stakeholder(ctx, stakeholder: str) -> None:
    """Delete a stakeholder.

    STAKEHOLDER can be a stakeholder name or ID.

    A stakeholder can only be deleted if no payments reference it.
    Deactivate it instead to keep the payment history.

    Examples:
        profitshare stakeholder delete "Alice"
        profitshare stakeholder delete 1
    """
    db = ctx.obj["db"]
    service = StakeholderService(db)
    stakeholder_id = resolve_stakeholder_or_exit(ctx, service, stakeholder)
    sh = service.require_stakeholder(stakeholder_id)

    if not click.confirm(f"Are you sure you want to delete stakeholder '{sh.name}' (ID: {sh.id})?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_stakeholder(stakeholder_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted stakeholder '{sh.name}'")


def register_commands(cli):
    """Register stakeholder commands with main CLI."""
    cli.add_command(stakeholder_group, name="stakeholder")
