"""Port for reading the records billing computations consume."""

from datetime import datetime
from typing import Protocol

from src.domain.models import Invoice, Transaction, Vehicle


class RecordNotFoundError(LookupError):
    """Raised when a requested record does not exist."""


class BillingRepositoryPort(Protocol):
    """Port exposing vehicles, invoices and transactions as domain models."""

    def fetch_vehicle(self, vehicle_id: str) -> Vehicle:
        """Return a vehicle or raise RecordNotFoundError."""

    def fetch_invoice(self, invoice_id: str) -> Invoice:
        """Return an invoice with its line items or raise RecordNotFoundError."""

    def fetch_invoices(self) -> list[Invoice]:
        """Return every invoice with its line items."""

    def fetch_transactions(
        self,
        start: datetime | None,
        end: datetime | None,
    ) -> list[Transaction]:
        """Return transactions, optionally bounded by date."""


__all__ = ["BillingRepositoryPort", "RecordNotFoundError"]
