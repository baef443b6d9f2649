"""Main CLI entry point."""

import click
from givingcircle.cli.logging_setup import configure_logging
from givingcircle.cli.notifications import ClickNotificationSink
from givingcircle.database.factories import create_sqlite_database
from givingcircle.domain.donation import DonationStore
from givingcircle.domain.session import DonationSession
from givingcircle.domain.share import DEFAULT_SHARE_BASE_URL

# Import and register all commands at module level
from givingcircle.cli.commands import add, donation, summary, share


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides GIVINGCIRCLE_DB_PATH environment variable)",
    envvar="GIVINGCIRCLE_DB_PATH",
)
@click.option(
    "--user",
    help="Identity of the signed-in donor",
    envvar="GIVINGCIRCLE_USER",
)
@click.option(
    "--serialize-mutations/--no-serialize-mutations",
    default=False,
    help="Run add/update/delete one at a time",
    envvar="GIVINGCIRCLE_SERIALIZE_MUTATIONS",
)
@click.option(
    "--share-base-url",
    default=DEFAULT_SHARE_BASE_URL,
    show_default=True,
    help="Base URL for shareable profile links",
    envvar="GIVINGCIRCLE_SHARE_BASE_URL",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx,
    db_path: str | None,
    user: str | None,
    serialize_mutations: bool,
    share_base_url: str,
    verbose: bool,
):
    """Giving Circle - record, summarize and share your donations."""
    ctx.ensure_object(dict)
    configure_logging(verbose)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)

        store = DonationStore(
            db, notifier=ClickNotificationSink(), serialize_mutations=serialize_mutations
        )
        ctx.obj["db"] = db
        ctx.obj["store"] = store
        ctx.obj["session"] = DonationSession(store, owner_id=user)
        ctx.obj["share_base_url"] = share_base_url


# Register all commands
add.register_commands(cli)
donation.register_commands(cli)
summary.register_commands(cli)
share.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
