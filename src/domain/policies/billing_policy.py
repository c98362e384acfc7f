"""Billing policy passed explicitly into domain services."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_CLAIM_RATE,
    DEFAULT_DAILY_RATE,
    DEFAULT_LINE_TOLERANCE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_VAT_RATE,
    DEFAULT_WEEKLY_RATE,
)


@dataclass(frozen=True)
class BillingPolicy:
    """Rates and tolerances applied by billing computations.

    Attributes:
        vat_rate: VAT fraction applied to VAT-inclusive amounts.
        claim_rate: Daily rate for insurance-claim hires.
        default_daily_rate: Fallback daily rate for vehicles without one.
        default_weekly_rate: Fallback weekly rate for vehicles without one.
        page_size: Number of records per report page.
        line_tolerance: Allowed rounding drift per invoice line.
    """

    vat_rate: Decimal = DEFAULT_VAT_RATE
    claim_rate: Decimal = DEFAULT_CLAIM_RATE
    default_daily_rate: Decimal = DEFAULT_DAILY_RATE
    default_weekly_rate: Decimal = DEFAULT_WEEKLY_RATE
    page_size: int = DEFAULT_PAGE_SIZE
    line_tolerance: Decimal = DEFAULT_LINE_TOLERANCE


DEFAULT_BILLING_POLICY = BillingPolicy()


__all__ = ["BillingPolicy", "DEFAULT_BILLING_POLICY"]
