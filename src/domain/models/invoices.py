"""Domain models for invoices, line items and invoice aggregates."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class PaymentStatus(str, Enum):
    """Payment state recorded on an invoice."""

    PENDING = "pending"
    PARTIALLY_PAID = "partially_paid"
    PAID = "paid"
    OVERDUE = "overdue"
    UNPAID = "unpaid"


@dataclass(frozen=True)
class LineItem:
    """One billable entry on an invoice."""

    description: str
    quantity: Decimal
    unit_price: Decimal
    discount: Decimal = Decimal("0")
    include_vat: bool = False


@dataclass(frozen=True)
class LineTotals:
    """Computed amounts for a single line item.

    Attributes:
        gross: Quantity times unit price.
        discount_amount: Discount taken from the gross amount.
        net_after_discount: Gross minus discount.
        vat_amount: VAT charged on the discounted amount.
        total_line: Discounted amount plus VAT.
    """

    gross: Decimal
    discount_amount: Decimal
    net_after_discount: Decimal
    vat_amount: Decimal
    total_line: Decimal


@dataclass(frozen=True)
class Invoice:
    """Invoice record as supplied by persistence.

    ``subtotal`` and ``vat_amount`` are the persisted aggregates and may be
    absent on older records.
    """

    invoice_id: str
    total: Decimal
    paid_amount: Decimal
    remaining_amount: Decimal
    due_date: datetime
    payment_status: PaymentStatus
    line_items: list[LineItem] = field(default_factory=list)
    subtotal: Decimal | None = None
    vat_amount: Decimal | None = None
    issued_on: datetime | None = None
    customer_name: str | None = None


@dataclass(frozen=True)
class PrecisionAmbiguity:
    """Divergence between recorded aggregates and recomputed line totals."""

    recorded: Decimal
    recomputed: Decimal
    tolerance: Decimal

    @property
    def difference(self) -> Decimal:
        """Return recorded minus recomputed."""
        return self.recorded - self.recomputed


@dataclass(frozen=True)
class InvoiceBreakdown:
    """Cost breakdown for an invoice.

    ``net``, ``vat`` and ``total`` follow the recorded aggregates while the
    ``line_*`` fields are recomputed from the line items. Both are kept so
    callers can display them side by side.
    """

    net: Decimal
    vat: Decimal
    discount_total: Decimal
    total: Decimal
    paid: Decimal
    owing_raw: Decimal
    lines: list[LineTotals]
    line_net: Decimal
    line_vat: Decimal
    line_total: Decimal
    ambiguity: PrecisionAmbiguity | None = None

    @property
    def owing(self) -> Decimal:
        """Return the amount owing for display, never negative."""
        return max(self.owing_raw, Decimal("0"))

    @property
    def overpaid(self) -> bool:
        """Return True when more was paid than the invoice total."""
        return self.owing_raw < 0


@dataclass(frozen=True)
class PaymentSettlement:
    """Remaining balance and payment status after a payment."""

    remaining_amount: Decimal
    payment_status: PaymentStatus


@dataclass(frozen=True)
class PortfolioSummary:
    """Totals over a collection of invoices."""

    total_amount: Decimal
    total_paid: Decimal
    total_outstanding: Decimal
    overdue_count: int
    invoice_count: int
    page_count: int
    page_size: int


__all__ = [
    "PaymentStatus",
    "LineItem",
    "LineTotals",
    "Invoice",
    "PrecisionAmbiguity",
    "InvoiceBreakdown",
    "PaymentSettlement",
    "PortfolioSummary",
]
