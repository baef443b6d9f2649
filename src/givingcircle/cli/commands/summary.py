"""Summary commands."""

import click
from givingcircle.cli.error_handling import exit_with_error
from givingcircle.domain.session import DonationSession
from givingcircle.domain.summary import build_profile_stats, frequency_distribution
from givingcircle.utils.formatting import format_currency, format_percent

BAR_WIDTH = 40


def _render_bar(share) -> str:
    """Render a text bar proportional to a share between 0 and 1."""
    filled = int(round(float(share) * BAR_WIDTH))
    return "#" * filled


@click.command("summary")
@click.option("--stats/--no-stats", default=True, help="Include profile statistics")
@click.pass_context
def summary(ctx, stats: bool) -> None:
    """Show donation totals by frequency for the signed-in user."""
    session: DonationSession = ctx.obj["session"]
    if session.owner_id is None:
        exit_with_error(ctx, "No user signed in (use --user or GIVINGCIRCLE_USER)")

    totals = session.summary
    click.echo(f"\nDonation summary for {session.owner_id}")
    click.echo("=" * 60)
    click.echo(f"{'Total Donations':<24} {format_currency(totals.total, cents=False):>14}")
    click.echo(f"{'Monthly Donations':<24} {format_currency(totals.monthly, cents=False):>14}")
    click.echo(f"{'Annual Donations':<24} {format_currency(totals.annual, cents=False):>14}")
    click.echo(f"{'One-time Donations':<24} {format_currency(totals.one_time, cents=False):>14}")

    rows = frequency_distribution(totals)
    if rows:
        click.echo("\nDonation Distribution")
        click.echo("-" * 60)
        for row in rows:
            click.echo(
                f"{row.label:<10} {format_percent(row.share):>5} "
                f"{format_currency(row.amount, cents=False):>10}  {_render_bar(row.share)}"
            )

    if not stats:
        return

    profile = build_profile_stats(session.donations)
    click.echo("\nProfile")
    click.echo("-" * 60)
    click.echo(f"{'Donations':<24} {profile.donation_count:>14}")
    click.echo(f"{'Unique Organizations':<24} {profile.organization_count:>14}")
    click.echo(f"{'Categories':<24} {profile.category_count:>14}")
    if profile.first_donation_date is not None:
        click.echo(f"Tracking donations since {profile.first_donation_date.isoformat()}.")

    if profile.top_organizations:
        click.echo("\nTop Organizations")
        for entry in profile.top_organizations:
            plural = "s" if entry.count > 1 else ""
            click.echo(f"  {entry.organization_name:<36} {entry.count} donation{plural}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
