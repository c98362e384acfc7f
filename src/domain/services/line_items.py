"""Invoice line item calculations."""

from decimal import Decimal

from src.domain.models import LineItem, LineTotals
from src.domain.policies import DEFAULT_BILLING_POLICY, BillingPolicy
from src.domain.services.validation import validate_line_item


def compute_line(
    item: LineItem,
    policy: BillingPolicy = DEFAULT_BILLING_POLICY,
) -> LineTotals:
    """Compute discount, VAT and total for one invoice line.

    The discount is taken from the gross amount first and VAT is charged on
    the discounted amount.

    Args:
        item: Line item to price.
        policy: Billing policy supplying the VAT rate.

    Returns:
        LineTotals: Gross, discount, net, VAT and line total.

    Raises:
        ValidationError: If quantity, unit price or discount is invalid.
    """
    quantity, unit_price, discount = validate_line_item(item)
    gross = quantity * unit_price
    discount_amount = discount / 100 * gross
    net_after_discount = gross - discount_amount
    if item.include_vat:
        vat_amount = net_after_discount * policy.vat_rate
    else:
        vat_amount = Decimal("0")
    return LineTotals(
        gross=gross,
        discount_amount=discount_amount,
        net_after_discount=net_after_discount,
        vat_amount=vat_amount,
        total_line=net_after_discount + vat_amount,
    )


__all__ = ["compute_line"]
