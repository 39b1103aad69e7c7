"""Main CLI entry point."""

import logging

import click
from salontrack.database.factories import create_sqlite_database

# Import and register all commands at module level
from salontrack.cli.commands import (
    analytics,
    catalog,
    clients,
    expense,
    inventory,
    sale,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SALONTRACK_DB_PATH environment variable)",
    envvar="SALONTRACK_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="SALONTRACK_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Salontrack - Salon sales, inventory and client tracking.

    Record multi-service sales, log expenses, keep product stock, review
    analytics and send promotions to clients.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
sale.register_commands(cli)
expense.register_commands(cli)
catalog.register_commands(cli)
inventory.register_commands(cli)
analytics.register_commands(cli)
clients.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
