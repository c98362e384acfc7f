"""Use case to summarize the invoice portfolio for reporting."""

from datetime import datetime

from src.application.ports.billing_repository import BillingRepositoryPort
from src.domain.models import Invoice, PortfolioSummary
from src.domain.policies import DEFAULT_BILLING_POLICY, BillingPolicy
from src.domain.services.portfolio import paginate, summarize_portfolio
from src.infrastructure.logging.logger import get_app_logger


class GetPortfolioSummaryUseCase:
    """Summarize invoices and split them into report pages."""

    def __init__(
        self,
        billing_repository: BillingRepositoryPort,
        logger=None,
        policy: BillingPolicy | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            billing_repository: Port providing invoice records.
            logger: Optional logger compatible with logging.Logger-like API.
            policy: Optional billing policy supplying the page size.
        """
        self._billing_repository = billing_repository
        self._logger = logger or get_app_logger()
        self._policy = policy or DEFAULT_BILLING_POLICY

    def execute(self, as_of: datetime) -> PortfolioSummary:
        """Return portfolio totals as of the given instant."""
        invoices = self._billing_repository.fetch_invoices()
        summary = summarize_portfolio(invoices, as_of, self._policy)
        self._logger.info(
            f"Portfolio summary: invoices={summary.invoice_count}, "
            f"outstanding={summary.total_outstanding}, "
            f"overdue={summary.overdue_count}"
        )
        return summary

    def pages(self) -> list[list[Invoice]]:
        """Return all invoices split into report pages."""
        invoices = self._billing_repository.fetch_invoices()
        return paginate(invoices, self._policy.page_size)


__all__ = ["GetPortfolioSummaryUseCase", "PortfolioSummary"]
