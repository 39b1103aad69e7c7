"""Product and stock commands."""

import click
from datetime import date

from salontrack.cli.error_handling import handle_domain_error
from salontrack.domain.entities import StockTransactionType
from salontrack.domain.inventory import InventoryService
from salontrack.utils.amount_parser import parse_amount
from salontrack.utils.currency import format_inr
from salontrack.utils.date_parser import parse_date, to_iso

STATUS_LABELS = {"out": "Out of stock", "low": "Low stock", "ok": "In stock"}


@click.group()
def product_group():
    """Manage products."""
    pass


@product_group.command("add")
@click.argument("name")
@click.option("--expiry", help="Expiry date (YYYY-MM-DD)")
@click.pass_context
def add_product(ctx, name: str, expiry: str | None):
    """Add a product."""
    service = InventoryService(ctx.obj["db"])
    try:
        expiry_date = to_iso(parse_date(expiry)) if expiry else None
        product_id = service.add_product(name=name, expiry_date=expiry_date)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Added product '{name}' with ID {product_id}")


@product_group.command("list")
@click.pass_context
def list_products(ctx):
    """List products with current stock."""
    service = InventoryService(ctx.obj["db"])
    products = service.list_products_with_stock()
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"\n{'ID':<6} {'Name':<30} {'Expiry':<12} {'Stock':>7}  {'Status':<14}")
    click.echo("-" * 72)
    for item in products:
        click.echo(
            f"{item.product.id:<6} {item.product.name[:30]:<30} "
            f"{item.product.expiry_date or '-':<12} {item.stock:>7}  "
            f"{STATUS_LABELS[item.status]:<14}"
        )


@product_group.command("delete")
@click.argument("product_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_product(ctx, product_id: int, yes: bool):
    """Delete a product and its stock history."""
    service = InventoryService(ctx.obj["db"])
    if not yes:
        click.confirm(
            f"Delete product {product_id} and all of its stock entries?", abort=True
        )
    try:
        removed = service.delete_product(product_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted product {product_id} ({removed} stock entries removed)")


@click.group()
def stock_group():
    """Record and review stock movements."""
    pass


@stock_group.command("add")
@click.argument("product_id", type=int)
@click.argument("quantity", type=int)
@click.option(
    "--type",
    "entry_type",
    type=click.Choice([t.value for t in StockTransactionType]),
    default=StockTransactionType.TRANSACTION.value,
    show_default=True,
    help="'revaluation' sets the level; 'transaction' adds a signed delta",
)
@click.option("--price", help="Unit price, required for transactions")
@click.option("--date", "entry_date", help="Entry date (YYYY-MM-DD or relative), default today")
@click.pass_context
def add_stock(
    ctx,
    product_id: int,
    quantity: int,
    entry_type: str,
    price: str | None,
    entry_date: str | None,
):
    """Record stock for a product.

    Examples:
        salontrack stock add 1 10 --type revaluation
        salontrack stock add 1 --price 250 -- -3
    """
    service = InventoryService(ctx.obj["db"])

    try:
        day = to_iso(parse_date(entry_date)) if entry_date else to_iso(date.today())
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        unit_price = parse_amount(price) if price is not None else None
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        service.record_transaction(
            product_id=product_id,
            date=day,
            type=StockTransactionType(entry_type),
            quantity=quantity,
            price=unit_price,
        )
        stock = service.get_current_stock(product_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Recorded {entry_type} for product {product_id}. Current stock: {stock}")


@stock_group.command("list")
@click.option("--product", "product_id", type=int, help="Only this product")
@click.pass_context
def list_stock(ctx, product_id: int | None):
    """List stock entries, newest first."""
    service = InventoryService(ctx.obj["db"])
    transactions = service.list_transactions(product_id)
    if not transactions:
        click.echo("No stock entries found.")
        return

    click.echo(f"\n{'ID':<6} {'Date':<12} {'Product':<25} {'Type':<12} {'Qty':>6} {'Price':>12}")
    click.echo("-" * 78)
    for entry in transactions:
        click.echo(
            f"{entry.id:<6} {entry.date:<12} {entry.product_name[:25]:<25} "
            f"{entry.type.value:<12} {entry.quantity:>6} {format_inr(entry.price):>12}"
        )


def register_commands(cli):
    """Register inventory commands with main CLI."""
    cli.add_command(product_group, name="product")
    cli.add_command(stock_group, name="stock")
