"""Service menu and staff commands."""

import click

from salontrack.cli.error_handling import handle_domain_error
from salontrack.domain.catalog import (
    GENDERS,
    GROUP_CATEGORIES,
    SERVICE_CATEGORIES,
    CatalogService,
)
from salontrack.domain.revenue import is_non_discountable_group
from salontrack.utils.amount_parser import parse_amount
from salontrack.utils.currency import format_inr


@click.group()
def service_group():
    """Manage catalog services."""
    pass


@service_group.command("add")
@click.argument("name")
@click.argument("price")
@click.option("--category", type=click.Choice(SERVICE_CATEGORIES), required=True, help="Service category")
@click.option("--group", "group_name", help="Service group name")
@click.pass_context
def add_service(ctx, name: str, price: str, category: str, group_name: str | None):
    """Add a service to the menu."""
    service = CatalogService(ctx.obj["db"])
    try:
        service_id = service.add_service(
            name=name, category=category, price=parse_amount(price), group_name=group_name
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Added service '{name}' ({category}) with ID {service_id}")


@service_group.command("list")
@click.option("--category", type=click.Choice(SERVICE_CATEGORIES), help="Only this category")
@click.pass_context
def list_services(ctx, category: str | None):
    """List catalog services."""
    service = CatalogService(ctx.obj["db"])
    services = service.list_services(category)
    if not services:
        click.echo("No services found.")
        return

    groups = {g.id: g.name for g in service.list_service_groups()}
    click.echo(f"\n{'ID':<6} {'Name':<30} {'Category':<10} {'Group':<20} {'Price':>12}")
    click.echo("-" * 82)
    for item in services:
        group = groups.get(item.group_id, "")
        click.echo(
            f"{item.id:<6} {item.name[:30]:<30} {item.category:<10} "
            f"{group[:20]:<20} {format_inr(item.price):>12}"
        )


@service_group.command("price")
@click.argument("service_id", type=int)
@click.argument("price")
@click.pass_context
def update_price(ctx, service_id: int, price: str):
    """Change a service's price."""
    service = CatalogService(ctx.obj["db"])
    try:
        value = parse_amount(price)
        service.update_service_price(service_id, value)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated service {service_id} price to {format_inr(value)}")


@service_group.command("delete")
@click.argument("service_id", type=int)
@click.pass_context
def delete_service(ctx, service_id: int):
    """Delete a catalog service."""
    service = CatalogService(ctx.obj["db"])
    try:
        service.delete_service(service_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted service {service_id}")


@click.group()
def group_group():
    """Manage service groups."""
    pass


@group_group.command("add")
@click.argument("name")
@click.option("--category", type=click.Choice(GROUP_CATEGORIES), default="both", show_default=True)
@click.option("--order", type=int, help="Display position, default after the last group")
@click.pass_context
def add_group(ctx, name: str, category: str, order: int | None):
    """Create a service group."""
    service = CatalogService(ctx.obj["db"])
    try:
        group_id = service.add_service_group(name=name, category=category, order=order)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created service group '{name}' with ID {group_id}")


@group_group.command("list")
@click.pass_context
def list_groups(ctx):
    """List service groups in display order."""
    service = CatalogService(ctx.obj["db"])
    groups = service.list_service_groups()
    if not groups:
        click.echo("No service groups found.")
        return

    for group in groups:
        note = "  (no discount)" if is_non_discountable_group(group.name) else ""
        click.echo(f"{group.order:>3}. {group.name} [{group.category}] (ID: {group.id}){note}")


@group_group.command("delete")
@click.argument("group_id", type=int)
@click.pass_context
def delete_group(ctx, group_id: int):
    """Delete a service group no service uses."""
    service = CatalogService(ctx.obj["db"])
    try:
        service.delete_service_group(group_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted service group {group_id}")


@click.group()
def stylist_group():
    """Manage stylists."""
    pass


@stylist_group.command("add")
@click.argument("name")
@click.option("--gender", type=click.Choice(GENDERS), required=True)
@click.pass_context
def add_stylist(ctx, name: str, gender: str):
    """Add a stylist."""
    service = CatalogService(ctx.obj["db"])
    try:
        stylist_id = service.add_stylist(name=name, gender=gender)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Added stylist '{name}' with ID {stylist_id}")


@stylist_group.command("list")
@click.option("--gender", type=click.Choice(GENDERS), help="Only this gender")
@click.pass_context
def list_stylists(ctx, gender: str | None):
    """List stylists."""
    service = CatalogService(ctx.obj["db"])
    stylists = service.list_stylists(gender)
    if not stylists:
        click.echo("No stylists found.")
        return

    for stylist in stylists:
        click.echo(f"{stylist.name} ({stylist.gender}) (ID: {stylist.id})")


@stylist_group.command("delete")
@click.argument("stylist_id", type=int)
@click.pass_context
def delete_stylist(ctx, stylist_id: int):
    """Delete a stylist."""
    service = CatalogService(ctx.obj["db"])
    try:
        service.delete_stylist(stylist_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted stylist {stylist_id}")


def register_commands(cli):
    """Register catalog commands with main CLI."""
    cli.add_command(service_group, name="service")
    cli.add_command(group_group, name="group")
    cli.add_command(stylist_group, name="stylist")
