"""Expense domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from salontrack.database.base import Database
from salontrack.domain.analytics import average
from salontrack.domain.date_range import DateLike, filter_by_date
from salontrack.domain.entities import Expense, ExpenseSummary
from salontrack.domain.errors import ValidationError, invalid_date
from salontrack.utils.date_parser import is_iso_date


class ExpenseService:
    """Service for logging expenses."""

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def _validate(
        self, item: Optional[str], amount: Optional[Decimal], date: Optional[str]
    ) -> None:
        if item is not None and not item.strip():
            raise ValidationError("Please enter an item")
        if amount is not None and amount <= 0:
            raise ValidationError("Amount must be greater than 0")
        if date is not None and not is_iso_date(date):
            raise ValidationError(invalid_date(date))

    def add_expense(self, item: str, amount: Decimal, date: str) -> int:
        """Log an expense. Returns expense ID."""
        self._validate(item, amount, date)
        return self.db.create_expense(item=item.strip(), amount=amount, date=date)

    def update_expense(
        self,
        expense_id: int,
        item: Optional[str] = None,
        amount: Optional[Decimal] = None,
        date: Optional[str] = None,
    ) -> None:
        """Update the fields that are provided."""
        self._validate(item, amount, date)
        self.db.update_expense(expense_id, item=item, amount=amount, date=date)

    def delete_expense(self, expense_id: int) -> None:
        """Delete an expense."""
        self.db.delete_expense(expense_id)

    def list_expenses(
        self,
        preset: str = "all",
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
        today: Optional[date] = None,
    ) -> list[Expense]:
        """List expenses in a preset or custom range, newest first."""
        return filter_by_date(
            self.db.list_expenses(), preset, date_from, date_to, today=today
        )

    def summarize(
        self,
        preset: str = "all",
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
        today: Optional[date] = None,
    ) -> ExpenseSummary:
        """Count, total and average of expenses in the range."""
        expenses = self.list_expenses(preset, date_from, date_to, today=today)
        total = sum(float(e.amount) for e in expenses)
        return ExpenseSummary(
            count=len(expenses),
            total=total,
            average=average(total, len(expenses)),
            expenses=tuple(expenses),
        )
