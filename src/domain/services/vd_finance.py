"""VD claim finance computations."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import (
    CLIENT_REPAIR_RATE,
    SOLICITOR_FEE_CAP,
    SOLICITOR_FEE_RATE,
)
from src.domain.models import MaintenancePart, VDFinanceValues
from src.domain.policies import DEFAULT_BILLING_POLICY, BillingPolicy
from src.domain.services.validation import require_non_negative


def calculate_vd_finance_values(
    total_amount: Decimal,
    purchased_items: Decimal,
    policy: BillingPolicy = DEFAULT_BILLING_POLICY,
) -> VDFinanceValues:
    """Split a VAT-inclusive settlement into net, fees, repair and profit.

    Args:
        total_amount: Settlement received, VAT included.
        purchased_items: Cost of items bought for the repair.
        policy: Billing policy supplying the VAT rate.

    Returns:
        VDFinanceValues: Net, VAT in, solicitor fee, client repair and
        profit. Profit may be negative when purchases exceed the net.

    Raises:
        ValidationError: If either amount is negative.
    """
    total = require_non_negative("total_amount", total_amount)
    purchased = require_non_negative("purchased_items", purchased_items)

    net_amount = total / (1 + policy.vat_rate)
    vat_in = total - net_amount
    solicitor_fee = min(total * SOLICITOR_FEE_RATE, SOLICITOR_FEE_CAP)
    client_repair = (net_amount - purchased) * CLIENT_REPAIR_RATE
    profit = net_amount - purchased - client_repair

    return VDFinanceValues(
        net_amount=net_amount,
        vat_in=vat_in,
        solicitor_fee=solicitor_fee,
        client_repair=client_repair,
        profit=profit,
    )


def calculate_parts_total(
    parts: Iterable[MaintenancePart],
    labor_charge: Decimal,
    labor_vat: bool,
    policy: BillingPolicy = DEFAULT_BILLING_POLICY,
) -> Decimal:
    """Return parts plus labour, each grossed up by VAT when flagged."""
    net, vat = _parts_and_labor(parts, labor_charge, labor_vat, policy)
    return net + vat


def calculate_vat_out(
    parts: Iterable[MaintenancePart],
    labor_charge: Decimal,
    labor_vat: bool,
    policy: BillingPolicy = DEFAULT_BILLING_POLICY,
) -> Decimal:
    """Return the VAT charged on flagged parts and labour."""
    _, vat = _parts_and_labor(parts, labor_charge, labor_vat, policy)
    return vat


def _parts_and_labor(
    parts: Iterable[MaintenancePart],
    labor_charge: Decimal,
    labor_vat: bool,
    policy: BillingPolicy,
) -> tuple[Decimal, Decimal]:
    net = Decimal("0")
    vat = Decimal("0")
    for part in parts:
        part_net = require_non_negative("quantity", part.quantity) * (
            require_non_negative("cost", part.cost)
        )
        net += part_net
        if part.include_vat:
            vat += part_net * policy.vat_rate

    labor = require_non_negative("labor_charge", labor_charge)
    net += labor
    if labor_vat:
        vat += labor * policy.vat_rate
    return net, vat


__all__ = [
    "calculate_vd_finance_values",
    "calculate_parts_total",
    "calculate_vat_out",
]
