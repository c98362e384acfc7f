"""Use case to build the itemized breakdown of an invoice."""

from src.application.ports.billing_repository import BillingRepositoryPort
from src.domain.models import InvoiceBreakdown
from src.domain.policies import DEFAULT_BILLING_POLICY, BillingPolicy
from src.domain.services.invoices import aggregate_invoice
from src.infrastructure.logging.logger import get_app_logger


class GetInvoiceBreakdownUseCase:
    """Compute invoice breakdowns for document generation."""

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
            policy: Optional billing policy, defaults to the standard rates.
        """
        self._billing_repository = billing_repository
        self._logger = logger or get_app_logger()
        self._policy = policy or DEFAULT_BILLING_POLICY

    def execute(self, invoice_id: str) -> InvoiceBreakdown:
        """Return the breakdown of a single invoice.

        Args:
            invoice_id: Identifier of the invoice.

        Returns:
            InvoiceBreakdown: Recorded and recomputed invoice figures.
        """
        invoice = self._billing_repository.fetch_invoice(invoice_id)
        breakdown = aggregate_invoice(invoice, self._policy, self._logger)
        self._logger.info(
            f"Invoice {invoice_id} breakdown: lines={len(breakdown.lines)}, "
            f"total={breakdown.total}, owing={breakdown.owing}"
        )
        return breakdown


__all__ = ["GetInvoiceBreakdownUseCase", "InvoiceBreakdown"]
