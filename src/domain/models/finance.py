"""Domain models for transactions and period financial summaries."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Direction of a finance transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class PeriodGranularity(str, Enum):
    """Supported reporting period lengths."""

    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class Transaction:
    """Recorded income or expense.

    Attributes:
        type: Income or expense.
        amount: Non-negative transaction amount.
        date: Instant the transaction was recorded for.
        payment_status: Optional payment status copied from the source.
        category: Optional finance category.
        description: Optional free-text description.
    """

    type: TransactionType
    amount: Decimal
    date: datetime
    payment_status: str | None = None
    category: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class FinancialSummary:
    """Income, expenses and margin over a reporting period."""

    total_income: Decimal
    total_expenses: Decimal
    period_start: datetime
    period_end: datetime
    transaction_count: int = 0

    @property
    def net_income(self) -> Decimal:
        """Return total_income minus total_expenses."""
        return self.total_income - self.total_expenses

    @property
    def profit_margin(self) -> Decimal:
        """Return net income as a percentage of income, 0 without income."""
        if self.total_income > 0:
            return self.net_income / self.total_income * 100
        return Decimal("0")


__all__ = [
    "TransactionType",
    "PeriodGranularity",
    "Transaction",
    "FinancialSummary",
]
