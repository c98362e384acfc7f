"""Tests for rental rate resolution."""

from datetime import datetime
from decimal import Decimal

import pytest

from src.domain.errors import ValidationError
from src.domain.models import RentalKind, RentalReason, RentalRequest, Vehicle
from src.domain.policies import BillingPolicy
from src.domain.services.rates import resolve_rate, resolve_request_rate


def test_resolve_rate_uses_vehicle_rates() -> None:
    """Configured vehicle rates should be returned as-is."""
    vehicle = Vehicle(
        vehicle_id="v1",
        daily_rental_rate=Decimal("75"),
        weekly_rental_rate=Decimal("400"),
    )

    assert resolve_rate(vehicle, RentalKind.DAILY) == Decimal("75")
    assert resolve_rate(vehicle, RentalKind.WEEKLY) == Decimal("400")


@pytest.mark.parametrize("rate", [None, Decimal("0"), Decimal("-5")])
def test_resolve_rate_falls_back_to_defaults(rate) -> None:
    """Missing or non-positive rates should use the policy defaults."""
    vehicle = Vehicle(
        vehicle_id="v1",
        daily_rental_rate=rate,
        weekly_rental_rate=rate,
    )

    assert resolve_rate(vehicle, RentalKind.DAILY) == Decimal("60")
    assert resolve_rate(vehicle, RentalKind.WEEKLY) == Decimal("360")


def test_resolve_rate_claim_ignores_vehicle() -> None:
    """Claim hires should always use the claim rate."""
    vehicle = Vehicle(vehicle_id="v1", daily_rental_rate=Decimal("75"))

    assert resolve_rate(vehicle, RentalKind.CLAIM) == Decimal("340")
    assert resolve_rate(vehicle, "claim") == Decimal("340")


def test_resolve_rate_reads_policy() -> None:
    """Defaults and claim rate should come from the given policy."""
    policy = BillingPolicy(
        claim_rate=Decimal("300"),
        default_daily_rate=Decimal("50"),
    )
    vehicle = Vehicle(vehicle_id="v1")

    assert resolve_rate(vehicle, RentalKind.CLAIM, policy) == Decimal("300")
    assert resolve_rate(vehicle, RentalKind.DAILY, policy) == Decimal("50")


def test_resolve_request_rate_prefers_negotiated_rate() -> None:
    """A negotiated rate should override vehicle and claim rates."""
    request = RentalRequest(
        vehicle_id="v1",
        kind=RentalKind.CLAIM,
        start=datetime(2024, 1, 1),
        end=datetime(2024, 1, 3),
        negotiated_rate=Decimal("250"),
    )

    rate = resolve_request_rate(request, Vehicle(vehicle_id="v1"))

    assert rate == Decimal("250")


def test_resolve_request_rate_uses_claim_rate_for_claim_reason() -> None:
    """Claim reason should price at the claim rate whatever the kind."""
    request = RentalRequest(
        vehicle_id="v1",
        kind=RentalKind.DAILY,
        start=datetime(2024, 1, 1),
        end=datetime(2024, 1, 3),
        reason=RentalReason.CLAIM,
    )

    rate = resolve_request_rate(request, Vehicle(vehicle_id="v1"))

    assert rate == Decimal("340")


def test_resolve_request_rate_rejects_non_positive_negotiated_rate() -> None:
    """Negotiated rates must be positive."""
    request = RentalRequest(
        vehicle_id="v1",
        kind=RentalKind.DAILY,
        start=datetime(2024, 1, 1),
        end=datetime(2024, 1, 3),
        negotiated_rate=Decimal("0"),
    )

    with pytest.raises(ValidationError):
        resolve_request_rate(request, Vehicle(vehicle_id="v1"))
