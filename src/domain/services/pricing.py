"""Rental pricing services."""

from datetime import datetime, timedelta
from decimal import Decimal

from src.domain.constants import FREE_RENTAL_REASONS
from src.domain.errors import ValidationError
from src.domain.models import (
    HireAgreementTotals,
    HireCharges,
    RentalKind,
    RentalQuote,
    RentalReason,
    RentalRequest,
    Vehicle,
)
from src.domain.policies import DEFAULT_BILLING_POLICY, BillingPolicy
from src.domain.services.periods import resolve_end
from src.domain.services.rates import resolve_rate, resolve_request_rate
from src.domain.services.validation import (
    require_instant,
    require_non_negative,
    require_percentage,
)

_ONE_DAY = timedelta(days=1)


def price_rental(
    request: RentalRequest,
    vehicle: Vehicle,
    policy: BillingPolicy = DEFAULT_BILLING_POLICY,
) -> RentalQuote:
    """Price the base hire of a rental request.

    Daily and claim hires are charged per started day; weekly hires are
    charged per week with the end aligned to Monday boundaries. Staff and
    own-driver hires are free of charge. Delivery, collection, insurance and
    storage are not included, see :func:`apply_hire_charges`.

    Args:
        request: Rental booking details.
        vehicle: Vehicle being hired.
        policy: Billing policy supplying rates.

    Returns:
        RentalQuote: Duration, rate and base total.

    Raises:
        ValidationError: If the request is incomplete or ends before it starts.
    """
    start = require_instant("start", request.start)
    end = resolve_end(request)
    if end < start:
        raise ValidationError(
            f"Rental end {end.isoformat()} is before start {start.isoformat()}"
        )

    kind = RentalKind(request.kind)
    if request.reason == RentalReason.CLAIM:
        kind = RentalKind.CLAIM
    rate = resolve_request_rate(request, vehicle, policy)

    if kind == RentalKind.WEEKLY:
        duration_units = request.week_count
    else:
        duration_units = _started_days(end - start)

    if _is_free(request.reason):
        total = Decimal("0")
    else:
        total = rate * duration_units

    return RentalQuote(
        kind=kind,
        start=start,
        end=end,
        duration_units=duration_units,
        rate=rate,
        total=total,
    )


def apply_hire_charges(
    quote: RentalQuote,
    charges: HireCharges,
) -> HireAgreementTotals:
    """Combine a base quote with the extras printed on a hire agreement.

    Insurance is charged per hire day.

    Raises:
        ValidationError: If any charge is negative.
    """
    delivery = require_non_negative("delivery_charge", charges.delivery_charge)
    collection = require_non_negative(
        "collection_charge",
        charges.collection_charge,
    )
    insurance_per_day = require_non_negative(
        "insurance_per_day",
        charges.insurance_per_day,
    )
    storage = require_non_negative("storage_total", charges.storage_total)
    recovery = require_non_negative("recovery_total", charges.recovery_total)

    insurance_total = insurance_per_day * quote.duration_days
    total = (
        quote.total
        + delivery
        + collection
        + insurance_total
        + storage
        + recovery
    )
    return HireAgreementTotals(
        base_total=quote.total,
        delivery_charge=delivery,
        collection_charge=collection,
        insurance_total=insurance_total,
        storage_total=storage,
        recovery_total=recovery,
        total=total,
    )


def calculate_overdue_cost(
    end: datetime,
    as_of: datetime,
    kind: RentalKind,
    vehicle: Vehicle,
    reason: RentalReason | None = None,
    policy: BillingPolicy = DEFAULT_BILLING_POLICY,
) -> Decimal:
    """Return the charge for keeping a vehicle past its rental end.

    Overdue time is counted in started days. Daily hires switch to the
    weekly rate whenever the leftover days would cost more than a week.

    Args:
        end: Agreed rental end.
        as_of: Instant the overdue charge is computed at.
        kind: Rental billing basis.
        vehicle: Vehicle being hired.
        reason: Optional hire reason; claim hires use the claim rate.
        policy: Billing policy supplying rates.

    Returns:
        Decimal: Overdue charge, zero when the rental is not overdue.
    """
    end = require_instant("end", end)
    as_of = require_instant("as_of", as_of)
    if as_of <= end:
        return Decimal("0")

    overdue_days = _started_days(as_of - end)
    kind = RentalKind(kind)
    if kind == RentalKind.CLAIM or reason == RentalReason.CLAIM:
        return overdue_days * policy.claim_rate

    weekly_rate = resolve_rate(vehicle, RentalKind.WEEKLY, policy)
    if kind == RentalKind.WEEKLY:
        overdue_weeks = -(-overdue_days // 7)
        return overdue_weeks * weekly_rate

    daily_rate = resolve_rate(vehicle, RentalKind.DAILY, policy)
    overdue_weeks, remaining_days = divmod(overdue_days, 7)
    if remaining_days * daily_rate > weekly_rate:
        return (overdue_weeks + 1) * weekly_rate
    return overdue_weeks * weekly_rate + remaining_days * daily_rate


def calculate_discount(amount: Decimal, percentage: Decimal) -> Decimal:
    """Return ``percentage`` percent of ``amount``.

    Raises:
        ValidationError: If the amount is negative or the percentage is
            outside [0, 100].
    """
    amount = require_non_negative("amount", amount)
    percentage = require_percentage("percentage", percentage)
    return amount * percentage / 100


def _started_days(elapsed: timedelta) -> int:
    days, remainder = divmod(elapsed, _ONE_DAY)
    if remainder:
        days += 1
    return days


def _is_free(reason: RentalReason | None) -> bool:
    if reason is None:
        return False
    return RentalReason(reason).value in FREE_RENTAL_REASONS


__all__ = [
    "price_rental",
    "apply_hire_charges",
    "calculate_overdue_cost",
    "calculate_discount",
]
