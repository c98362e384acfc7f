"""Tests for rental pricing."""

from datetime import datetime
from decimal import Decimal

import pytest

from src.domain.errors import ValidationError
from src.domain.models import (
    HireCharges,
    RentalKind,
    RentalReason,
    RentalRequest,
    Vehicle,
)
from src.domain.services.pricing import (
    apply_hire_charges,
    calculate_discount,
    calculate_overdue_cost,
    price_rental,
)

VEHICLE = Vehicle(
    vehicle_id="v1",
    daily_rental_rate=Decimal("70"),
    weekly_rental_rate=Decimal("400"),
)


def _daily(start: datetime, end: datetime, **kwargs) -> RentalRequest:
    return RentalRequest(
        vehicle_id="v1",
        kind=kwargs.pop("kind", RentalKind.DAILY),
        start=start,
        end=end,
        **kwargs,
    )


def test_weekly_rental_from_tuesday_aligns_and_prices_weeks() -> None:
    """A two week hire from Tuesday should end one week after next Monday."""
    request = RentalRequest(
        vehicle_id="v1",
        kind=RentalKind.WEEKLY,
        start=datetime(2024, 1, 2, 10, 0),
        week_count=2,
    )

    quote = price_rental(request, VEHICLE)

    assert quote.end == datetime(2024, 1, 15, 10, 0)
    assert quote.duration_units == 2
    assert quote.rate == Decimal("400")
    assert quote.total == Decimal("800")


def test_daily_rental_rounds_partial_days_up() -> None:
    """Partial days should be charged as whole days."""
    quote = price_rental(
        _daily(datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 3, 10, 0)),
        VEHICLE,
    )

    assert quote.duration_units == 3
    assert quote.total == Decimal("210")


def test_daily_rental_exact_days() -> None:
    """Whole 24h spans should not be rounded up."""
    quote = price_rental(
        _daily(datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 3, 9, 0)),
        VEHICLE,
    )

    assert quote.duration_units == 2
    assert quote.total == Decimal("140")


def test_claim_rental_uses_claim_rate() -> None:
    """Claim hires should be priced per day at the claim rate."""
    quote = price_rental(
        _daily(
            datetime(2024, 1, 1),
            datetime(2024, 1, 4),
            kind=RentalKind.CLAIM,
        ),
        VEHICLE,
    )

    assert quote.rate == Decimal("340")
    assert quote.total == Decimal("1020")


def test_claim_reason_prices_weekly_request_per_day() -> None:
    """Claim reason should switch a weekly booking to claim day pricing."""
    request = RentalRequest(
        vehicle_id="v1",
        kind=RentalKind.WEEKLY,
        start=datetime(2024, 1, 1),
        week_count=1,
        reason=RentalReason.CLAIM,
    )

    quote = price_rental(request, VEHICLE)

    assert quote.kind == RentalKind.CLAIM
    assert quote.duration_units == 7
    assert quote.total == Decimal("2380")


def test_staff_rental_is_free() -> None:
    """Staff and own-driver hires should cost nothing."""
    for reason in (RentalReason.STAFF, RentalReason.OWN_DRIVER):
        quote = price_rental(
            _daily(
                datetime(2024, 1, 1),
                datetime(2024, 1, 3),
                reason=reason,
            ),
            VEHICLE,
        )
        assert quote.duration_units == 2
        assert quote.total == Decimal("0")


def test_end_before_start_is_rejected() -> None:
    """Rentals ending before they start should not be priced."""
    with pytest.raises(ValidationError):
        price_rental(
            _daily(datetime(2024, 1, 3), datetime(2024, 1, 1)),
            VEHICLE,
        )


def test_weekly_rental_rejects_zero_weeks() -> None:
    """Week count below one should be rejected, not clamped."""
    request = RentalRequest(
        vehicle_id="v1",
        kind=RentalKind.WEEKLY,
        start=datetime(2024, 1, 1),
        week_count=0,
    )

    with pytest.raises(ValidationError):
        price_rental(request, VEHICLE)


def test_apply_hire_charges_adds_extras() -> None:
    """Hire agreement totals should add delivery, insurance and storage."""
    quote = price_rental(
        _daily(
            datetime(2024, 1, 1),
            datetime(2024, 1, 4),
            kind=RentalKind.CLAIM,
        ),
        VEHICLE,
    )
    charges = HireCharges(
        delivery_charge=Decimal("25"),
        collection_charge=Decimal("25"),
        insurance_per_day=Decimal("10"),
        storage_total=Decimal("100"),
    )

    totals = apply_hire_charges(quote, charges)

    assert totals.base_total == Decimal("1020")
    assert totals.insurance_total == Decimal("30")
    assert totals.total == Decimal("1200")


def test_apply_hire_charges_counts_weekly_days() -> None:
    """Insurance on weekly quotes should be charged for every day."""
    request = RentalRequest(
        vehicle_id="v1",
        kind=RentalKind.WEEKLY,
        start=datetime(2024, 1, 1),
        week_count=2,
    )
    quote = price_rental(request, VEHICLE)

    totals = apply_hire_charges(
        quote,
        HireCharges(insurance_per_day=Decimal("5")),
    )

    assert totals.insurance_total == Decimal("70")
    assert totals.total == Decimal("870")


def test_apply_hire_charges_rejects_negative_charge() -> None:
    """Negative extras are invalid input."""
    quote = price_rental(
        _daily(datetime(2024, 1, 1), datetime(2024, 1, 2)),
        VEHICLE,
    )

    with pytest.raises(ValidationError):
        apply_hire_charges(quote, HireCharges(delivery_charge=Decimal("-1")))


def test_overdue_cost_is_zero_before_end() -> None:
    """Rentals returned on time should have no overdue charge."""
    end = datetime(2024, 1, 10)

    cost = calculate_overdue_cost(end, end, RentalKind.DAILY, VEHICLE)

    assert cost == Decimal("0")


def test_overdue_cost_daily_caps_remaining_days_at_weekly_rate() -> None:
    """Leftover days costing more than a week should be billed as a week."""
    end = datetime(2024, 1, 1)

    short = calculate_overdue_cost(
        end, datetime(2024, 1, 3, 1, 0), RentalKind.DAILY, VEHICLE
    )
    capped = calculate_overdue_cost(
        end, datetime(2024, 1, 7), RentalKind.DAILY, VEHICLE
    )
    mixed = calculate_overdue_cost(
        end, datetime(2024, 1, 10), RentalKind.DAILY, VEHICLE
    )

    assert short == Decimal("210")
    assert capped == Decimal("400")
    assert mixed == Decimal("540")


def test_overdue_cost_weekly_and_claim() -> None:
    """Weekly hires round up to weeks, claims charge per day."""
    end = datetime(2024, 1, 1)
    as_of = datetime(2024, 1, 9)

    weekly = calculate_overdue_cost(end, as_of, RentalKind.WEEKLY, VEHICLE)
    claim = calculate_overdue_cost(end, as_of, RentalKind.CLAIM, VEHICLE)

    assert weekly == Decimal("800")
    assert claim == Decimal("2720")


def test_calculate_discount() -> None:
    """Discounts should be a percentage of the amount."""
    assert calculate_discount(Decimal("200"), Decimal("15")) == Decimal("30")
    with pytest.raises(ValidationError):
        calculate_discount(Decimal("200"), Decimal("101"))
