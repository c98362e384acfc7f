"""Domain models for vehicles, rental requests and rental quotes."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class RentalKind(str, Enum):
    """Billing basis of a rental."""

    DAILY = "daily"
    WEEKLY = "weekly"
    CLAIM = "claim"


class RentalReason(str, Enum):
    """Business reason recorded for a hire."""

    HIRED = "hired"
    CLAIM = "claim"
    OWN_DRIVER = "o/d"
    STAFF = "staff"
    WORKSHOP = "workshop"
    CLAIM_SUBSTITUTE = "c-substitute"
    HIRE_SUBSTITUTE = "h-substitute"


@dataclass(frozen=True)
class Vehicle:
    """Billing-relevant subset of a fleet vehicle.

    Attributes:
        vehicle_id: Vehicle identifier.
        daily_rental_rate: Commercial daily rate, if configured.
        weekly_rental_rate: Commercial weekly rate, if configured.
        registration: Registration plate, informational only.
    """

    vehicle_id: str
    daily_rental_rate: Decimal | None = None
    weekly_rental_rate: Decimal | None = None
    registration: str | None = None


@dataclass(frozen=True)
class RentalRequest:
    """Booking details needed to price a rental.

    Daily and claim requests carry an explicit ``end``; weekly requests carry
    ``week_count`` and have their end aligned to Monday boundaries.
    """

    vehicle_id: str
    kind: RentalKind
    start: datetime
    end: datetime | None = None
    week_count: int | None = None
    reason: RentalReason | None = None
    negotiated_rate: Decimal | None = None


@dataclass(frozen=True)
class RentalQuote:
    """Base hire price for a rental request."""

    kind: RentalKind
    start: datetime
    end: datetime
    duration_units: int
    rate: Decimal
    total: Decimal

    @property
    def duration_days(self) -> int:
        """Return the hire length in days."""
        if self.kind == RentalKind.WEEKLY:
            return self.duration_units * 7
        return self.duration_units


@dataclass(frozen=True)
class HireCharges:
    """Manually added charges printed on a hire agreement."""

    delivery_charge: Decimal = Decimal("0")
    collection_charge: Decimal = Decimal("0")
    insurance_per_day: Decimal = Decimal("0")
    storage_total: Decimal = Decimal("0")
    recovery_total: Decimal = Decimal("0")


@dataclass(frozen=True)
class HireAgreementTotals:
    """Base hire total combined with hire agreement extras."""

    base_total: Decimal
    delivery_charge: Decimal
    collection_charge: Decimal
    insurance_total: Decimal
    storage_total: Decimal
    recovery_total: Decimal
    total: Decimal


__all__ = [
    "RentalKind",
    "RentalReason",
    "Vehicle",
    "RentalRequest",
    "RentalQuote",
    "HireCharges",
    "HireAgreementTotals",
]
