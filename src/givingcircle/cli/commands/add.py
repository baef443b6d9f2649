"""Add donation command."""

import click
from givingcircle.cli.error_handling import exit_with_error, handle_domain_error
from givingcircle.domain.entities import Frequency
from givingcircle.domain.errors import DomainError
from givingcircle.domain.session import DonationSession
from givingcircle.utils.amount_parser import parse_amount
from givingcircle.utils.date_parser import parse_date

FREQUENCY_CHOICES = [frequency.value for frequency in Frequency]


@click.command("add")
@click.option("--amount", required=True, help="Donation amount (e.g., 100 or $1,250.00)")
@click.option("--organization", required=True, help="Organization name (e.g., 'Red Cross')")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Donation date (YYYY-MM-DD, 'today' or 'yesterday')",
)
@click.option(
    "--frequency",
    type=click.Choice(FREQUENCY_CHOICES, case_sensitive=False),
    default=Frequency.ONE_TIME.value,
    show_default=True,
    help="How often the donation recurs",
)
@click.option("--category", help="Category (e.g., Education, Healthcare, Environment)")
@click.option("--notes", help="Notes")
@click.pass_context
def add_donation(
    ctx,
    amount: str,
    organization: str,
    date: str,
    frequency: str,
    category: str | None,
    notes: str | None,
):
    """Record a donation for the signed-in user.

    Examples:
        giving --user u1 add --amount 100 --organization "Red Cross" --date 2023-12-15
        giving --user u1 add --amount 25 --organization "World Wildlife Fund" --frequency monthly
    """
    session: DonationSession = ctx.obj["session"]

    # Parse amount
    try:
        donation_amount = parse_amount(amount)
    except ValueError as e:
        exit_with_error(ctx, f"Invalid amount format: {e}")

    # Parse date
    try:
        donation_date = parse_date(date)
    except ValueError as e:
        exit_with_error(ctx, f"Invalid date format: {e}")

    try:
        donation = session.add_donation(
            {
                "amount": donation_amount,
                "organization_name": organization,
                "date": donation_date,
                "frequency": frequency.lower(),
                "category": category,
                "notes": notes,
            }
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"  ID: {donation.id}")
    click.echo(f"  Date: {donation.date.isoformat()}")
    click.echo(f"  Frequency: {donation.frequency.label}")
    if donation.category:
        click.echo(f"  Category: {donation.category}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_donation)
