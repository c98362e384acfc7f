"""Tests for the GetPortfolioSummaryUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
)
from src.domain.models import Invoice, PaymentStatus
from src.domain.policies import BillingPolicy


def _invoices(count: int) -> list[Invoice]:
    return [
        Invoice(
            invoice_id=f"inv-{index}",
            total=Decimal("50"),
            paid_amount=Decimal("0"),
            remaining_amount=Decimal("50"),
            due_date=datetime(2024, 1, 1),
            payment_status=PaymentStatus.PENDING,
        )
        for index in range(count)
    ]


def test_execute_summarizes_all_invoices() -> None:
    """Use case should summarize every invoice from the repository."""
    repository = MagicMock()
    repository.fetch_invoices.return_value = _invoices(23)

    summary = GetPortfolioSummaryUseCase(
        repository,
        logger=MagicMock(),
    ).execute(as_of=datetime(2024, 2, 1))

    assert summary.total_amount == Decimal("1150")
    assert summary.total_outstanding == Decimal("1150")
    assert summary.overdue_count == 23
    assert summary.page_count == 3


def test_pages_follow_policy_page_size() -> None:
    """Pages should be split with the configured page size."""
    repository = MagicMock()
    repository.fetch_invoices.return_value = _invoices(7)

    pages = GetPortfolioSummaryUseCase(
        repository,
        logger=MagicMock(),
        policy=BillingPolicy(page_size=3),
    ).pages()

    assert [len(page) for page in pages] == [3, 3, 1]
