"""Invoice portfolio summaries and report pagination."""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from typing import TypeVar

from src.domain.errors import ValidationError
from src.domain.models import Invoice, PortfolioSummary
from src.domain.policies import DEFAULT_BILLING_POLICY, BillingPolicy
from src.domain.services.invoices import is_overdue, recorded_amounts

T = TypeVar("T")


def summarize_portfolio(
    invoices: Sequence[Invoice],
    as_of: datetime,
    policy: BillingPolicy = DEFAULT_BILLING_POLICY,
) -> PortfolioSummary:
    """Summarize recorded amounts across a collection of invoices.

    Args:
        invoices: Invoices to summarize.
        as_of: Instant used to decide whether an invoice is overdue.
        policy: Billing policy supplying the report page size.

    Returns:
        PortfolioSummary: Totals, overdue count and page count.
    """
    total_amount = Decimal("0")
    total_paid = Decimal("0")
    total_outstanding = Decimal("0")
    overdue_count = 0
    for invoice in invoices:
        total, paid, remaining = recorded_amounts(invoice)
        total_amount += total
        total_paid += paid
        total_outstanding += remaining
        if is_overdue(invoice, as_of):
            overdue_count += 1

    return PortfolioSummary(
        total_amount=total_amount,
        total_paid=total_paid,
        total_outstanding=total_outstanding,
        overdue_count=overdue_count,
        invoice_count=len(invoices),
        page_count=page_count(len(invoices), policy.page_size),
        page_size=policy.page_size,
    )


def page_count(item_count: int, page_size: int) -> int:
    """Return the number of pages needed for ``item_count`` records."""
    _require_page_size(page_size)
    return -(-item_count // page_size)


def paginate(items: Sequence[T], page_size: int) -> list[list[T]]:
    """Split records into consecutive pages of at most ``page_size``."""
    _require_page_size(page_size)
    return [
        list(items[index:index + page_size])
        for index in range(0, len(items), page_size)
    ]


def _require_page_size(page_size: int) -> None:
    if page_size < 1:
        raise ValidationError(f"page_size must be at least 1: {page_size}")


__all__ = ["summarize_portfolio", "page_count", "paginate"]
