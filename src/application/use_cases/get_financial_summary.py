"""Use case to compute income, expenses and margin for a period."""

from datetime import datetime

from src.application.ports.billing_repository import BillingRepositoryPort
from src.domain.models import FinancialSummary, PeriodGranularity
from src.domain.services.periods import period_bounds
from src.domain.services.summaries import summarize_period
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialSummaryUseCase:
    """Compute period financial summaries from recorded transactions."""

    def __init__(
        self,
        billing_repository: BillingRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            billing_repository: Port providing transaction records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._billing_repository = billing_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        period_start: datetime,
        period_end: datetime,
    ) -> FinancialSummary:
        """Return the summary for an inclusive period.

        Args:
            period_start: Inclusive lower bound.
            period_end: Inclusive upper bound.

        Returns:
            FinancialSummary: Totals, net income and profit margin.
        """
        transactions = self._billing_repository.fetch_transactions(
            period_start,
            period_end,
        )
        self._logger.info(
            f"Fetched {len(transactions)} transactions between "
            f"{period_start:%Y-%m-%d} and {period_end:%Y-%m-%d}"
        )
        summary = summarize_period(transactions, period_start, period_end)
        self._logger.info(
            f"Financial summary computed: income={summary.total_income}, "
            f"expenses={summary.total_expenses}, net={summary.net_income}"
        )
        return summary

    def execute_for_period(
        self,
        reference: datetime,
        granularity: PeriodGranularity = PeriodGranularity.MONTH,
    ) -> FinancialSummary:
        """Return the summary of the period containing ``reference``."""
        period_start, period_end = period_bounds(reference, granularity)
        return self.execute(period_start, period_end)


__all__ = ["GetFinancialSummaryUseCase", "FinancialSummary"]
