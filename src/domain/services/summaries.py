"""Period financial summaries."""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from src.domain.errors import ValidationError
from src.domain.models import FinancialSummary, Transaction, TransactionType
from src.domain.services.periods import month_bounds
from src.domain.services.validation import (
    require_instant,
    require_non_negative,
    require_period_end,
)


def summarize_period(
    transactions: Iterable[Transaction],
    period_start: datetime,
    period_end: datetime,
) -> FinancialSummary:
    """Summarize income and expenses recorded within a period.

    Args:
        transactions: Source transactions, left untouched.
        period_start: Inclusive lower bound.
        period_end: Inclusive upper bound; a plain date covers that whole
            day.

    Returns:
        FinancialSummary: Totals, net income and profit margin.

    Raises:
        ValidationError: If the period ends before it starts or a
            transaction has a negative amount.
    """
    period_start = require_instant("period_start", period_start)
    period_end = require_period_end("period_end", period_end)
    if period_end < period_start:
        raise ValidationError(
            f"Period end {period_end.isoformat()} is before start "
            f"{period_start.isoformat()}"
        )

    total_income = Decimal("0")
    total_expenses = Decimal("0")
    count = 0
    for transaction in transactions:
        when = require_instant("date", transaction.date)
        if when < period_start or when > period_end:
            continue
        amount = require_non_negative("amount", transaction.amount)
        if TransactionType(transaction.type) == TransactionType.INCOME:
            total_income += amount
        else:
            total_expenses += amount
        count += 1

    return FinancialSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        period_start=period_start,
        period_end=period_end,
        transaction_count=count,
    )


def summarize_month(
    transactions: Iterable[Transaction],
    reference: datetime,
) -> FinancialSummary:
    """Summarize the calendar month containing ``reference``."""
    period_start, period_end = month_bounds(reference)
    return summarize_period(transactions, period_start, period_end)


__all__ = ["summarize_period", "summarize_month"]
