"""Maintenance job costing."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models import MaintenanceCostBreakdown, MaintenancePart
from src.domain.policies import DEFAULT_BILLING_POLICY, BillingPolicy
from src.domain.services.validation import require_non_negative


def calculate_maintenance_costs(
    parts: Iterable[MaintenancePart],
    labor_hours: Decimal,
    labor_rate: Decimal,
    include_vat_on_labor: bool,
    policy: BillingPolicy = DEFAULT_BILLING_POLICY,
) -> MaintenanceCostBreakdown:
    """Compute the net, VAT and totals of a maintenance job.

    Args:
        parts: Parts fitted, each with its own VAT flag.
        labor_hours: Hours of labour charged.
        labor_rate: Hourly labour rate.
        include_vat_on_labor: Whether VAT is charged on labour.
        policy: Billing policy supplying the VAT rate.

    Returns:
        MaintenanceCostBreakdown: Net and VAT amounts with parts and labour
        totals including their VAT.
    """
    parts_net = Decimal("0")
    parts_vat = Decimal("0")
    for part in parts:
        quantity = require_non_negative("quantity", part.quantity)
        cost = require_non_negative("cost", part.cost)
        part_net = quantity * cost
        parts_net += part_net
        if part.include_vat:
            parts_vat += part_net * policy.vat_rate

    labor_net = require_non_negative("labor_hours", labor_hours) * (
        require_non_negative("labor_rate", labor_rate)
    )
    labor_vat = Decimal("0")
    if include_vat_on_labor:
        labor_vat = labor_net * policy.vat_rate

    return MaintenanceCostBreakdown(
        net_amount=parts_net + labor_net,
        vat_amount=parts_vat + labor_vat,
        parts_total=parts_net + parts_vat,
        labor_total=labor_net + labor_vat,
    )


__all__ = ["calculate_maintenance_costs"]
