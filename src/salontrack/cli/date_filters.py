"""CLI helpers for date range resolution."""

import click

from salontrack.domain.date_range import PRESETS
from salontrack.utils.date_parser import parse_date, to_iso


def date_range_options(func):
    """Attach --period, --from and --to to a command."""
    func = click.option(
        "--to", "date_to", help="Custom range end (YYYY-MM-DD or relative like 'today')"
    )(func)
    func = click.option(
        "--from", "date_from", help="Custom range start (YYYY-MM-DD or relative like 'this month')"
    )(func)
    func = click.option(
        "--period",
        type=click.Choice(PRESETS),
        help="Named period: " + ", ".join(PRESETS),
    )(func)
    return func


def resolve_cli_date_range(
    ctx,
    *,
    period: str | None,
    date_from: str | None,
    date_to: str | None,
    default_period: str = "all",
) -> tuple[str, str | None, str | None]:
    """Resolve CLI range options into (preset, from, to).

    A custom range is returned as ``yyyy-MM-dd`` strings and wins over the
    preset downstream.
    """
    if period and (date_from or date_to):
        click.echo("Error: --period cannot be combined with --from or --to.", err=True)
        ctx.exit(1)

    if date_to and not date_from:
        click.echo("Error: --to requires --from.", err=True)
        ctx.exit(1)

    start = None
    end = None

    if date_from:
        try:
            start = to_iso(parse_date(date_from))
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if date_to:
        try:
            end = to_iso(parse_date(date_to))
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    if start is not None and end is not None and start > end:
        click.echo("Error: Start date must not be after end date.", err=True)
        ctx.exit(1)

    return period or default_period, start, end
