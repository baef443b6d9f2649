"""Donation management commands."""

from typing import Any

import click
from givingcircle.cli.commands.add import FREQUENCY_CHOICES
from givingcircle.cli.error_handling import exit_with_error, handle_domain_error
from givingcircle.domain.errors import DomainError
from givingcircle.domain.session import DonationSession
from givingcircle.utils.amount_parser import parse_amount
from givingcircle.utils.date_parser import parse_date
from givingcircle.utils.formatting import format_currency


@click.group()
def donation_group():
    """Manage donations."""
    pass


@donation_group.command("list")
@click.option("--verbose", "-v", is_flag=True, help="Show all fields including category and notes")
@click.pass_context
def list_donations(ctx, verbose: bool) -> None:
    """List the signed-in user's donations in the order they were added."""
    session: DonationSession = ctx.obj["session"]
    if session.owner_id is None:
        exit_with_error(ctx, "No user signed in (use --user or GIVINGCIRCLE_USER)")

    donations = session.donations
    if not donations:
        click.echo("No donations yet.")
        return

    click.echo(f"\nFound {len(donations)} donation(s):")
    if verbose:
        click.echo("=" * 80)
        for donation in donations:
            click.echo(f"\nDonation ID: {donation.id}")
            click.echo(f"  Organization: {donation.organization_name}")
            click.echo(f"  Amount: {format_currency(donation.amount)}")
            click.echo(f"  Date: {donation.date.isoformat()}")
            click.echo(f"  Frequency: {donation.frequency.label}")
            if donation.category:
                click.echo(f"  Category: {donation.category}")
            if donation.notes:
                click.echo(f"  Notes: {donation.notes}")
            click.echo("-" * 80)
    else:
        click.echo("-" * 100)
        click.echo(
            f"{'ID':<34} {'Organization':<28} {'Amount':>12} {'Date':<12} {'Frequency':<10}"
        )
        click.echo("-" * 100)
        for donation in donations:
            click.echo(
                f"{donation.id:<34} {donation.organization_name[:28]:<28} "
                f"{format_currency(donation.amount):>12} {donation.date.isoformat():<12} "
                f"{donation.frequency.label:<10}"
            )

    click.echo("-" * 100 if not verbose else "=" * 80)
    click.echo(f"TOTAL: {format_currency(session.summary.total)} | Count: {len(donations)}")


@donation_group.command("update")
@click.argument("donation_id")
@click.option("--amount", help="Donation amount (e.g., 100 or $1,250.00)")
@click.option("--organization", help="Organization name")
@click.option("--date", help="Donation date (YYYY-MM-DD, 'today' or 'yesterday')")
@click.option(
    "--frequency",
    type=click.Choice(FREQUENCY_CHOICES, case_sensitive=False),
    help="How often the donation recurs",
)
@click.option("--category", help="Category, or empty string to clear")
@click.option("--notes", help="Notes, or empty string to clear")
@click.pass_context
def update_donation(
    ctx,
    donation_id: str,
    amount: str | None,
    organization: str | None,
    date: str | None,
    frequency: str | None,
    category: str | None,
    notes: str | None,
) -> None:
    """Update a donation.

    Updates only the fields that are provided. Use --category "" to clear the category.

    Examples:
        giving --user u1 donation update 3f2a... --amount 50
        giving --user u1 donation update 3f2a... --frequency monthly --notes ""
    """
    session: DonationSession = ctx.obj["session"]
    changes: dict[str, Any] = {}

    if amount is not None:
        try:
            changes["amount"] = parse_amount(amount)
        except ValueError as e:
            exit_with_error(ctx, f"Invalid amount format: {e}")

    if date is not None:
        try:
            changes["date"] = parse_date(date)
        except ValueError as e:
            exit_with_error(ctx, f"Invalid date format: {e}")

    if organization is not None:
        changes["organization_name"] = organization
    if frequency is not None:
        changes["frequency"] = frequency.lower()
    # Empty string means clear
    if category is not None:
        changes["category"] = category or None
    if notes is not None:
        changes["notes"] = notes or None

    if not changes:
        exit_with_error(ctx, "Nothing to update; pass at least one field option")

    try:
        session.edit_donation(donation_id, changes)
    except DomainError as e:
        handle_domain_error(ctx, e)


@donation_group.command("delete")
@click.argument("donation_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_donation(ctx, donation_id: str, yes: bool) -> None:
    """Delete a donation.

    Examples:
        giving --user u1 donation delete 3f2a...
    """
    session: DonationSession = ctx.obj["session"]

    # Confirm deletion
    if not yes and not click.confirm(
        f"Are you sure you want to delete donation {donation_id}? This action cannot be undone."
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        session.delete_donation(donation_id)
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli: click.Group) -> None:
    """Register donation commands with main CLI."""
    cli.add_command(donation_group, name="donation")
