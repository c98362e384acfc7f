"""Invoice aggregation and payment settlement."""

from datetime import datetime
from decimal import Decimal
from logging import Logger

from src.domain.models import (
    Invoice,
    InvoiceBreakdown,
    PaymentSettlement,
    PaymentStatus,
    PrecisionAmbiguity,
)
from src.domain.policies import DEFAULT_BILLING_POLICY, BillingPolicy
from src.domain.services.line_items import compute_line
from src.domain.services.validation import (
    require_instant,
    require_non_negative,
    warn_on_overpayment,
)
from src.utils.decimal_utils import coerce_decimal


def aggregate_invoice(
    invoice: Invoice,
    policy: BillingPolicy = DEFAULT_BILLING_POLICY,
    logger: Logger | None = None,
) -> InvoiceBreakdown:
    """Build the cost breakdown of an invoice.

    Net and VAT come from the recorded invoice aggregates when present and
    fall back to the line items otherwise. An invoice without line items
    aggregates to zero whatever it records. Line totals are always recomputed
    independently; when the two disagree beyond the policy tolerance a
    PrecisionAmbiguity is attached and both figures are kept.

    Args:
        invoice: Invoice record.
        policy: Billing policy supplying VAT rate and tolerance.
        logger: Optional logger used for soft warnings.

    Returns:
        InvoiceBreakdown: Aggregated and recomputed invoice figures.
    """
    lines = [compute_line(item, policy) for item in invoice.line_items]
    zero = Decimal("0")
    gross_total = sum((line.gross for line in lines), zero)
    discount_total = sum((line.discount_amount for line in lines), zero)
    line_net = sum((line.net_after_discount for line in lines), zero)
    line_vat = sum((line.vat_amount for line in lines), zero)
    line_total = sum((line.total_line for line in lines), zero)

    if not lines:
        # No lines: recorded subtotal and VAT are ignored.
        net = zero
        vat = zero
    else:
        if invoice.subtotal is not None:
            net = require_non_negative("subtotal", invoice.subtotal)
        else:
            net = gross_total
        if invoice.vat_amount is not None:
            vat = require_non_negative("vat_amount", invoice.vat_amount)
        else:
            vat = line_vat

    total = net + vat - discount_total
    paid = require_non_negative("paid_amount", invoice.paid_amount)
    owing_raw = total - paid
    warn_on_overpayment(invoice.invoice_id, owing_raw, logger)

    ambiguity = None
    tolerance = policy.line_tolerance * len(lines)
    if abs(total - line_total) > tolerance:
        ambiguity = PrecisionAmbiguity(
            recorded=total,
            recomputed=line_total,
            tolerance=tolerance,
        )
        if logger is not None:
            logger.warning(
                f"Invoice {invoice.invoice_id} recorded total {total} "
                f"differs from line total {line_total}"
            )

    return InvoiceBreakdown(
        net=net,
        vat=vat,
        discount_total=discount_total,
        total=total,
        paid=paid,
        owing_raw=owing_raw,
        lines=lines,
        line_net=line_net,
        line_vat=line_vat,
        line_total=line_total,
        ambiguity=ambiguity,
    )


def settle_payment(total: Decimal, paid: Decimal) -> PaymentSettlement:
    """Return the remaining balance and status after ``paid`` was received.

    Raises:
        ValidationError: If either amount is negative.
    """
    total = require_non_negative("total", total)
    paid = require_non_negative("paid", paid)
    if paid >= total:
        return PaymentSettlement(Decimal("0"), PaymentStatus.PAID)
    if paid == 0:
        return PaymentSettlement(total, PaymentStatus.UNPAID)
    return PaymentSettlement(total - paid, PaymentStatus.PARTIALLY_PAID)


def is_overdue(invoice: Invoice, as_of: datetime) -> bool:
    """Return True when an unpaid invoice is past its due date."""
    if PaymentStatus(invoice.payment_status) == PaymentStatus.PAID:
        return False
    due_date = require_instant("due_date", invoice.due_date)
    return due_date < require_instant("as_of", as_of)


def recorded_amounts(invoice: Invoice) -> tuple[Decimal, Decimal, Decimal]:
    """Return the persisted total, paid and remaining amounts."""
    return (
        coerce_decimal(invoice.total),
        coerce_decimal(invoice.paid_amount),
        coerce_decimal(invoice.remaining_amount),
    )


__all__ = [
    "aggregate_invoice",
    "settle_payment",
    "is_overdue",
    "recorded_amounts",
]
