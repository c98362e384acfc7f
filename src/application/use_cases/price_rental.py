"""Use case to price a rental booking."""

from src.application.ports.billing_repository import BillingRepositoryPort
from src.domain.models import (
    HireAgreementTotals,
    HireCharges,
    RentalQuote,
    RentalRequest,
)
from src.domain.policies import DEFAULT_BILLING_POLICY, BillingPolicy
from src.domain.services.pricing import apply_hire_charges, price_rental
from src.infrastructure.logging.logger import get_app_logger


class PriceRentalUseCase:
    """Price rental requests against the vehicle's recorded rates."""

    def __init__(
        self,
        billing_repository: BillingRepositoryPort,
        logger=None,
        policy: BillingPolicy | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            billing_repository: Port providing vehicle records.
            logger: Optional logger compatible with logging.Logger-like API.
            policy: Optional billing policy, defaults to the standard rates.
        """
        self._billing_repository = billing_repository
        self._logger = logger or get_app_logger()
        self._policy = policy or DEFAULT_BILLING_POLICY

    def execute(self, request: RentalRequest) -> RentalQuote:
        """Return the base hire quote for a rental request.

        Args:
            request: Rental booking details.

        Returns:
            RentalQuote: Duration, rate and base total.
        """
        vehicle = self._billing_repository.fetch_vehicle(request.vehicle_id)
        quote = price_rental(request, vehicle, self._policy)
        self._logger.info(
            f"Priced {quote.kind.value} rental for vehicle "
            f"{request.vehicle_id}: units={quote.duration_units}, "
            f"rate={quote.rate}, total={quote.total}"
        )
        return quote

    def execute_with_charges(
        self,
        request: RentalRequest,
        charges: HireCharges,
    ) -> HireAgreementTotals:
        """Return hire agreement totals including manually added charges."""
        quote = self.execute(request)
        totals = apply_hire_charges(quote, charges)
        self._logger.info(
            f"Hire agreement total for vehicle {request.vehicle_id}: "
            f"{totals.total}"
        )
        return totals


__all__ = ["PriceRentalUseCase"]
