"""Tests for the GetFinancialSummaryUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.domain.models import PeriodGranularity, Transaction, TransactionType


def _transactions() -> list[Transaction]:
    return [
        Transaction(
            type=TransactionType.INCOME,
            amount=Decimal("100"),
            date=datetime(2024, 1, 10),
        ),
        Transaction(
            type=TransactionType.EXPENSE,
            amount=Decimal("40"),
            date=datetime(2024, 1, 12),
        ),
    ]


def test_execute_summarizes_fetched_transactions() -> None:
    """Use case should pass the bounds to the repository and summarize."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = _transactions()
    start = datetime(2024, 1, 1)
    end = datetime(2024, 1, 31, 23, 59)

    summary = GetFinancialSummaryUseCase(
        repository,
        logger=MagicMock(),
    ).execute(start, end)

    assert summary.net_income == Decimal("60")
    assert summary.profit_margin == Decimal("60")
    repository.fetch_transactions.assert_called_once_with(start, end)


def test_execute_for_period_uses_month_bounds() -> None:
    """Monthly summaries should query the whole calendar month."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = _transactions()

    summary = GetFinancialSummaryUseCase(
        repository,
        logger=MagicMock(),
    ).execute_for_period(datetime(2024, 1, 20), PeriodGranularity.MONTH)

    start, end = repository.fetch_transactions.call_args.args
    assert start == datetime(2024, 1, 1)
    assert end == datetime(2024, 1, 31, 23, 59, 59, 999999)
    assert summary.total_income == Decimal("100")
