"""Profile sharing command."""

import click
from givingcircle.cli.error_handling import exit_with_error
from givingcircle.domain.session import DonationSession
from givingcircle.domain.share import share_message, share_url
from givingcircle.utils.formatting import format_currency


@click.command("share")
@click.pass_context
def share(ctx) -> None:
    """Print a shareable link and message for the signed-in user's profile."""
    session: DonationSession = ctx.obj["session"]
    if session.owner_id is None:
        exit_with_error(ctx, "No user signed in (use --user or GIVINGCIRCLE_USER)")

    totals = session.summary
    click.echo(share_url(ctx.obj["share_base_url"], session.owner_id))
    click.echo(share_message(totals))
    click.echo(
        f"Total {format_currency(totals.total, cents=False)} | "
        f"Monthly {format_currency(totals.monthly, cents=False)} | "
        f"Annual {format_currency(totals.annual, cents=False)}"
    )


def register_commands(cli):
    """Register share command with main CLI."""
    cli.add_command(share)
