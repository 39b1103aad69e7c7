"""Expense commands."""

import click
from datetime import date

from salontrack.cli.date_filters import date_range_options, resolve_cli_date_range
from salontrack.cli.error_handling import handle_domain_error
from salontrack.domain.expenses import ExpenseService
from salontrack.utils.amount_parser import parse_amount
from salontrack.utils.currency import format_inr
from salontrack.utils.date_parser import parse_date, to_iso


@click.group()
def expense_group():
    """Log and review expenses."""
    pass


@expense_group.command("add")
@click.argument("item")
@click.argument("amount")
@click.option("--date", "expense_date", help="Expense date (YYYY-MM-DD or relative like 'yesterday'), default today")
@click.pass_context
def add_expense(ctx, item: str, amount: str, expense_date: str | None):
    """Log an expense."""
    service = ExpenseService(ctx.obj["db"])

    try:
        day = to_iso(parse_date(expense_date)) if expense_date else to_iso(date.today())
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        value = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        expense_id = service.add_expense(item=item, amount=value, date=day)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Logged expense {expense_id}: {item} {format_inr(value)}")


@expense_group.command("list")
@date_range_options
@click.pass_context
def list_expenses(ctx, period: str | None, date_from: str | None, date_to: str | None):
    """List expenses, newest first."""
    service = ExpenseService(ctx.obj["db"])
    preset, start, end = resolve_cli_date_range(
        ctx, period=period, date_from=date_from, date_to=date_to
    )

    expenses = service.list_expenses(preset, start, end)
    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(f"\nFound {len(expenses)} expense(s):")
    click.echo("-" * 70)
    click.echo(f"{'ID':<6} {'Date':<12} {'Item':<35} {'Amount':>15}")
    click.echo("-" * 70)
    for expense in expenses:
        click.echo(
            f"{expense.id:<6} {expense.date:<12} {expense.item[:35]:<35} "
            f"{format_inr(expense.amount):>15}"
        )


@expense_group.command("summary")
@date_range_options
@click.pass_context
def expense_summary(ctx, period: str | None, date_from: str | None, date_to: str | None):
    """Show count, total and average of expenses."""
    service = ExpenseService(ctx.obj["db"])
    preset, start, end = resolve_cli_date_range(
        ctx, period=period, date_from=date_from, date_to=date_to
    )

    summary = service.summarize(preset, start, end)
    click.echo(f"Expenses: {summary.count}")
    click.echo(f"Total:    {format_inr(summary.total)}")
    click.echo(f"Average:  {format_inr(summary.average)}")


@expense_group.command("delete")
@click.argument("expense_id", type=int)
@click.pass_context
def delete_expense(ctx, expense_id: int):
    """Delete an expense."""
    service = ExpenseService(ctx.obj["db"])
    try:
        service.delete_expense(expense_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted expense {expense_id}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
