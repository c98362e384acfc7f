"""Rate resolution for rental pricing."""

from decimal import Decimal

from src.domain.errors import ValidationError
from src.domain.models import RentalKind, RentalReason, RentalRequest, Vehicle
from src.domain.policies import DEFAULT_BILLING_POLICY, BillingPolicy
from src.utils.decimal_utils import coerce_optional_decimal


def resolve_rate(
    vehicle: Vehicle,
    kind: RentalKind,
    policy: BillingPolicy = DEFAULT_BILLING_POLICY,
) -> Decimal:
    """Return the per-day or per-week rate for a rental kind.

    Claim hires use the policy claim rate regardless of the vehicle's
    commercial rates. Missing or non-positive vehicle rates fall back to the
    policy defaults.

    Args:
        vehicle: Vehicle being hired.
        kind: Rental billing basis.
        policy: Billing policy supplying defaults and the claim rate.

    Returns:
        Decimal: Positive rate for the requested kind.
    """
    kind = RentalKind(kind)
    if kind == RentalKind.CLAIM:
        return policy.claim_rate
    if kind == RentalKind.WEEKLY:
        return _rate_or_default(
            vehicle.weekly_rental_rate,
            policy.default_weekly_rate,
        )
    return _rate_or_default(vehicle.daily_rental_rate, policy.default_daily_rate)


def resolve_request_rate(
    request: RentalRequest,
    vehicle: Vehicle,
    policy: BillingPolicy = DEFAULT_BILLING_POLICY,
) -> Decimal:
    """Return the rate for a request, honouring negotiated and claim rates.

    Raises:
        ValidationError: If a negotiated rate is given but not positive.
    """
    negotiated = coerce_optional_decimal(request.negotiated_rate)
    if negotiated is not None:
        if negotiated <= 0:
            raise ValidationError(
                f"negotiated_rate must be positive: {negotiated}"
            )
        return negotiated
    if request.reason == RentalReason.CLAIM:
        return policy.claim_rate
    return resolve_rate(vehicle, request.kind, policy)


def _rate_or_default(rate: Decimal | None, default: Decimal) -> Decimal:
    resolved = coerce_optional_decimal(rate)
    if resolved is None or resolved <= 0:
        return default
    return resolved


__all__ = ["resolve_rate", "resolve_request_rate"]
