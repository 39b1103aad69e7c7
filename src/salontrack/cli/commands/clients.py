"""Client ledger and promotion commands."""

import click

from salontrack.cli.date_filters import date_range_options, resolve_cli_date_range
from salontrack.cli.error_handling import handle_domain_error
from salontrack.domain.clients import MESSAGE_TEMPLATES, SORT_OPTIONS, ClientService, resolve_message
from salontrack.messaging.whatsapp import (
    DEFAULT_API_VERSION,
    WhatsAppClient,
    WhatsAppConfig,
)
from salontrack.utils.currency import format_inr


@click.group()
def clients_group():
    """Review clients and send promotions."""
    pass


@clients_group.command("list")
@click.option("--sort", type=click.Choice(SORT_OPTIONS), default="recent", show_default=True)
@click.option("--search", help="Filter by name or phone")
@date_range_options
@click.pass_context
def list_clients(
    ctx,
    sort: str,
    search: str | None,
    period: str | None,
    date_from: str | None,
    date_to: str | None,
):
    """List clients with visits, spend and last visit."""
    service = ClientService(ctx.obj["db"])
    preset, start, end = resolve_cli_date_range(
        ctx, period=period, date_from=date_from, date_to=date_to
    )

    clients = service.list_clients(sort=sort, search=search, preset=preset, date_from=start, date_to=end)
    if not clients:
        click.echo("No clients found.")
        return

    total, average = service.revenue_overview(clients)
    click.echo(f"\n{'Client':<25} {'Phone':<15} {'Visits':>6} {'Total spent':>15} {'Last visit':>12}")
    click.echo("-" * 77)
    for client in clients:
        click.echo(
            f"{client.name[:25]:<25} {client.phone:<15} {client.visits:>6} "
            f"{format_inr(client.total_spent):>15} {client.last_visit:>12}"
        )
    click.echo("-" * 77)
    click.echo(f"{len(clients)} client(s), revenue {format_inr(total)}, average {format_inr(average)}")


@clients_group.command("send")
@click.option("--template", type=click.Choice(list(MESSAGE_TEMPLATES)), help="Predefined message")
@click.option("--message", help="Custom message text, overrides --template")
@click.option("--search", help="Only clients matching name or phone")
@date_range_options
@click.option("--delay", type=float, default=1.0, show_default=True, help="Seconds between messages")
@click.option("--phone-number-id", envvar="WHATSAPP_PHONE_NUMBER_ID", help="WhatsApp phone number ID")
@click.option("--access-token", envvar="WHATSAPP_ACCESS_TOKEN", help="WhatsApp access token")
@click.option("--api-version", envvar="WHATSAPP_API_VERSION", default=DEFAULT_API_VERSION, show_default=True)
@click.option("--dry-run", is_flag=True, help="Show recipients without sending")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def send_promotion(
    ctx,
    template: str | None,
    message: str | None,
    search: str | None,
    period: str | None,
    date_from: str | None,
    date_to: str | None,
    delay: float,
    phone_number_id: str | None,
    access_token: str | None,
    api_version: str,
    dry_run: bool,
    yes: bool,
):
    """Send a WhatsApp promotion to clients.

    Without WhatsApp credentials the command only lists who would receive
    the message.

    Examples:
        salontrack clients send --template birthday --dry-run
        salontrack clients send --message "Diwali offer: 25% off" --period 3months
    """
    service = ClientService(ctx.obj["db"])
    preset, start, end = resolve_cli_date_range(
        ctx, period=period, date_from=date_from, date_to=date_to
    )

    try:
        text = resolve_message(template, message)
        clients = service.list_clients(search=search, preset=preset, date_from=start, date_to=end)
        recipients = service.build_recipients(clients, text)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not recipients:
        click.echo("No clients to message.")
        return

    if dry_run or not (phone_number_id and access_token):
        if not dry_run:
            click.echo("WhatsApp credentials not configured; showing recipients only.")
        click.echo(f"Would send to {len(recipients)} client(s):")
        for client in clients:
            click.echo(f"  {client.name} ({client.phone})")
        click.echo(f"\nMessage:\n{text}")
        return

    if not yes:
        click.confirm(f"Send message to {len(recipients)} client(s)?", abort=True)

    config = WhatsAppConfig(
        phone_number_id=phone_number_id,
        access_token=access_token,
        api_version=api_version,
    )
    with WhatsAppClient(config, http_client=ctx.obj.get("http_client")) as client:
        results = client.send_bulk(recipients, delay=delay)

    sent = [r for r in results if r.success]
    failed = [r for r in results if not r.success]
    click.echo(f"Sent {len(sent)} of {len(results)} message(s).")
    for result in failed:
        click.echo(f"  Failed {result.phone}: {result.error}", err=True)
    if failed:
        ctx.exit(1)


def register_commands(cli):
    """Register client commands with main CLI."""
    cli.add_command(clients_group, name="clients")
