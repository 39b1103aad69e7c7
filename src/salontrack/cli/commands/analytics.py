"""Analytics dashboard command."""

import click

from salontrack.cli.date_filters import date_range_options, resolve_cli_date_range
from salontrack.domain.analytics import (
    TOP_SERVICES,
    AnalyticsService,
    payment_distribution,
    percentage,
    service_distribution,
)
from salontrack.utils.currency import format_inr, format_percent


def _echo_section(title: str) -> None:
    click.echo(f"\n{title}")
    click.echo("-" * 60)


@click.command("analytics")
@date_range_options
@click.option("--top", type=click.IntRange(min=1), default=TOP_SERVICES, show_default=True, help="Services listed before 'Others'")
@click.pass_context
def analytics(ctx, period: str | None, date_from: str | None, date_to: str | None, top: int):
    """Show revenue, payment, service and stylist analytics.

    Defaults to today's figures. Use --period for a named range or
    --from/--to for a custom one.
    """
    service = AnalyticsService(ctx.obj["db"])
    preset, start, end = resolve_cli_date_range(
        ctx, period=period, date_from=date_from, date_to=date_to, default_period="today"
    )

    report = service.build_report(preset, start, end)
    totals = report.totals

    _echo_section("Summary")
    click.echo(f"{'Revenue':<30} {format_inr(totals.revenue):>20}")
    click.echo(f"{'Sales':<30} {totals.count:>20}")
    click.echo(f"{'Unique clients':<30} {totals.clients:>20}")
    click.echo(f"{'Average sale':<30} {format_inr(totals.average):>20}")
    click.echo(f"{'Collection (' + report.monthly_label + ')':<30} {format_inr(report.monthly_collection):>20}")
    growth = f"{'+' if report.growth > 0 else ''}{format_percent(report.growth)}"
    click.echo(f"{'Growth vs last month':<30} {growth:>20}")

    _echo_section("Payment methods")
    buckets = payment_distribution(report.payment_buckets)
    if not buckets:
        click.echo("No payments in this period.")
    for bucket in buckets:
        share = format_percent(percentage(bucket.revenue, totals.revenue))
        click.echo(
            f"{bucket.name:<20} {format_inr(bucket.revenue):>15} {bucket.count:>6} sale(s) {share:>8}"
        )

    _echo_section("Services")
    if not report.service_distribution:
        click.echo("No services in this period.")
    distribution = report.service_distribution
    if top != TOP_SERVICES:
        distribution = service_distribution(
            service.get_filtered_sales(preset, start, end), limit=top
        )
    service_total = sum(item.count for item in distribution)
    for item in distribution:
        share = format_percent(percentage(item.count, service_total))
        click.echo(f"{item.name[:35]:<35} {item.count:>6} {share:>8}")

    _echo_section("Stylists")
    if not report.stylists:
        click.echo("No stylist revenue in this period.")
    for stats in report.stylists:
        click.echo(
            f"{stats.name[:20]:<20} {format_inr(stats.revenue):>15} "
            f"{stats.appointments:>4} appt(s) {stats.services:>4} service(s)"
        )


def register_commands(cli):
    """Register analytics command with main CLI."""
    cli.add_command(analytics)
