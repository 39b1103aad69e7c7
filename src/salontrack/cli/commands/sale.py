"""Sale management commands."""

import click
from datetime import date

from salontrack.cli.date_filters import date_range_options, resolve_cli_date_range
from salontrack.cli.error_handling import handle_domain_error
from salontrack.domain.entities import LegacySale
from salontrack.domain.revenue import final_amount, non_discountable_group_ids
from salontrack.domain.sales import PAYMENT_METHODS, SaleService
from salontrack.utils.amount_parser import parse_amount
from salontrack.utils.currency import format_inr
from salontrack.utils.date_parser import parse_date, to_iso


def parse_service_selection(value: str) -> tuple[str, str | None]:
    """Split 'Service[:Stylist]' into its parts."""
    service_name, _, stylist = value.partition(":")
    return service_name.strip(), stylist.strip() or None


def describe_services(sale) -> str:
    """Comma-separated service names of a sale."""
    if isinstance(sale, LegacySale):
        return sale.service
    return ", ".join(line.name for line in sale.services)


@click.group()
def sale_group():
    """Record and review sales."""
    pass


@sale_group.command("add")
@click.argument("name")
@click.argument("phone")
@click.option(
    "--service",
    "services",
    multiple=True,
    required=True,
    help="Catalog service, optionally with stylist as 'Service:Stylist'. Repeat for more.",
)
@click.option("--date", "sale_date", help="Sale date (YYYY-MM-DD or relative like 'today'), default today")
@click.option(
    "--payment",
    type=click.Choice(PAYMENT_METHODS),
    default="Cash",
    show_default=True,
    help="Payment method",
)
@click.option("--discount", default="0", help="Discount percentage (0-100)")
@click.option("--amount", help="Total before discount, defaults to the sum of service prices")
@click.option("--stylist", help="Stylist for services given without one")
@click.pass_context
def add_sale(
    ctx,
    name: str,
    phone: str,
    services: tuple[str, ...],
    sale_date: str | None,
    payment: str,
    discount: str,
    amount: str | None,
    stylist: str | None,
):
    """Record a sale for a client.

    Examples:
        salontrack sale add "Priya" 9876543210 --service Haircut:Asha --service Facial
        salontrack sale add "Priya" 9876543210 --service Manicure --payment UPI --discount 10
    """
    db = ctx.obj["db"]
    service = SaleService(db)

    try:
        sale_day = to_iso(parse_date(sale_date)) if sale_date else to_iso(date.today())
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        discount_value = parse_amount(discount)
        amount_value = parse_amount(amount) if amount is not None else None
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    selections = [parse_service_selection(s) for s in services]

    try:
        lines = service.build_lines(selections)
        sale_id = service.add_sale(
            name=name,
            phone=phone,
            date=sale_day,
            payment_method=payment,
            services=lines,
            discount=discount_value,
            amount=amount_value,
            stylist=stylist,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    sale = service.get_sale(sale_id)
    excluded = non_discountable_group_ids(db.list_service_groups())
    click.echo(
        f"Recorded sale {sale_id} for {sale.name}: "
        f"{format_inr(final_amount(sale, excluded))}"
    )


@sale_group.command("list")
@date_range_options
@click.pass_context
def list_sales(ctx, period: str | None, date_from: str | None, date_to: str | None):
    """List sales, newest first."""
    db = ctx.obj["db"]
    service = SaleService(db)
    preset, start, end = resolve_cli_date_range(
        ctx, period=period, date_from=date_from, date_to=date_to
    )

    sales = service.list_sales(preset, start, end)
    if not sales:
        click.echo("No sales found.")
        return

    excluded = non_discountable_group_ids(db.list_service_groups())
    click.echo(f"\nFound {len(sales)} sale(s):")
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Client':<20} {'Phone':<14} "
        f"{'Services':<30} {'Payment':<12} {'Total':>12}"
    )
    click.echo("-" * 110)
    for sale in sales:
        services = describe_services(sale)
        if len(services) > 30:
            services = services[:27] + "..."
        click.echo(
            f"{sale.id:<6} {sale.date:<12} {sale.name[:20]:<20} {sale.phone:<14} "
            f"{services:<30} {sale.payment_method:<12} "
            f"{format_inr(final_amount(sale, excluded)):>12}"
        )
        if sale.discount:
            click.echo(f"{'':<6} discount {sale.discount}% on {format_inr(sale.amount)}")


@sale_group.command("delete")
@click.argument("sale_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_sale(ctx, sale_id: int, yes: bool):
    """Delete a sale."""
    db = ctx.obj["db"]
    service = SaleService(db)

    try:
        sale = service.get_sale(sale_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes:
        click.confirm(
            f"Delete sale {sale_id} ({sale.name}, {sale.date})?", abort=True
        )

    try:
        service.delete_sale(sale_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted sale {sale_id}")


def register_commands(cli):
    """Register sale commands with main CLI."""
    cli.add_command(sale_group, name="sale")
