"""Tests for the GetInvoiceBreakdownUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_invoice_breakdown import (
    GetInvoiceBreakdownUseCase,
)
from src.domain.models import Invoice, LineItem, PaymentStatus


def test_execute_returns_breakdown_for_invoice() -> None:
    """Use case should fetch the invoice and aggregate its lines."""
    invoice = Invoice(
        invoice_id="inv-1",
        total=Decimal("108"),
        paid_amount=Decimal("8"),
        remaining_amount=Decimal("100"),
        due_date=datetime(2024, 2, 1),
        payment_status=PaymentStatus.PENDING,
        line_items=[
            LineItem("Hire", Decimal("2"), Decimal("50"), Decimal("10"), True),
        ],
    )
    repository = MagicMock()
    repository.fetch_invoice.return_value = invoice
    logger = MagicMock()

    breakdown = GetInvoiceBreakdownUseCase(repository, logger=logger).execute(
        "inv-1"
    )

    assert breakdown.total == Decimal("108")
    assert breakdown.owing == Decimal("100")
    assert breakdown.ambiguity is None
    repository.fetch_invoice.assert_called_once_with("inv-1")
    logger.info.assert_called_once()
    logger.warning.assert_not_called()
