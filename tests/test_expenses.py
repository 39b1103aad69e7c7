"""Tests for the expense log."""

import pytest
from decimal import Decimal

from salontrack.domain.errors import NotFoundError, ValidationError


class TestExpenseService:
    """Tests for ExpenseService."""

    def test_add_and_list(self, expense_service):
        expense_service.add_expense("Rent", Decimal("25000"), "2025-03-01")
        expense_service.add_expense("Towels", Decimal("1200.50"), "2025-03-10")
        expenses = expense_service.list_expenses()
        assert [e.item for e in expenses] == ["Towels", "Rent"]
        assert expenses[0].amount == Decimal("1200.50")

    def test_amount_must_be_positive(self, expense_service):
        with pytest.raises(ValidationError, match="greater than 0"):
            expense_service.add_expense("Rent", Decimal("0"), "2025-03-01")

    def test_item_required(self, expense_service):
        with pytest.raises(ValidationError):
            expense_service.add_expense(" ", Decimal("10"), "2025-03-01")

    def test_invalid_date(self, expense_service):
        with pytest.raises(ValidationError):
            expense_service.add_expense("Rent", Decimal("10"), "March 1")

    def test_summary_by_period(self, expense_service, today):
        """Test count, total and average over a range."""
        expense_service.add_expense("Rent", Decimal("25000"), "2025-03-01")
        expense_service.add_expense("Towels", Decimal("1000"), "2025-03-10")
        expense_service.add_expense("Paint", Decimal("5000"), "2025-01-10")

        summary = expense_service.summarize("thisMonth", today=today)
        assert summary.count == 2
        assert summary.total == pytest.approx(26000.0)
        assert summary.average == pytest.approx(13000.0)
        assert len(summary.expenses) == 2

    def test_summary_empty(self, expense_service, today):
        summary = expense_service.summarize("today", today=today)
        assert (summary.count, summary.total, summary.average) == (0, 0, 0.0)

    def test_update_and_delete(self, expense_service):
        expense_id = expense_service.add_expense("Rent", Decimal("25000"), "2025-03-01")
        expense_service.update_expense(expense_id, amount=Decimal("26000"))
        assert expense_service.list_expenses()[0].amount == Decimal("26000")

        expense_service.delete_expense(expense_id)
        assert expense_service.list_expenses() == []
        with pytest.raises(NotFoundError):
            expense_service.delete_expense(expense_id)
