"""Domain models package."""

from .finance import (
    FinancialSummary,
    PeriodGranularity,
    Transaction,
    TransactionType,
)
from .invoices import (
    Invoice,
    InvoiceBreakdown,
    LineItem,
    LineTotals,
    PaymentSettlement,
    PaymentStatus,
    PortfolioSummary,
    PrecisionAmbiguity,
)
from .maintenance import MaintenanceCostBreakdown, MaintenancePart
from .rentals import (
    HireAgreementTotals,
    HireCharges,
    RentalKind,
    RentalQuote,
    RentalReason,
    RentalRequest,
    Vehicle,
)
from .vd_finance import VDFinanceValues

__all__ = [
    "FinancialSummary",
    "PeriodGranularity",
    "Transaction",
    "TransactionType",
    "Invoice",
    "InvoiceBreakdown",
    "LineItem",
    "LineTotals",
    "PaymentSettlement",
    "PaymentStatus",
    "PortfolioSummary",
    "PrecisionAmbiguity",
    "MaintenanceCostBreakdown",
    "MaintenancePart",
    "HireAgreementTotals",
    "HireCharges",
    "RentalKind",
    "RentalQuote",
    "RentalReason",
    "RentalRequest",
    "Vehicle",
    "VDFinanceValues",
]
