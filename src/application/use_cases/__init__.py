"""Application use cases package."""

from .get_financial_summary import (
    FinancialSummary,
    GetFinancialSummaryUseCase,
)
from .get_invoice_breakdown import (
    GetInvoiceBreakdownUseCase,
    InvoiceBreakdown,
)
from .get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
    PortfolioSummary,
)
from .price_rental import PriceRentalUseCase

__all__ = [
    "FinancialSummary",
    "GetFinancialSummaryUseCase",
    "GetInvoiceBreakdownUseCase",
    "InvoiceBreakdown",
    "GetPortfolioSummaryUseCase",
    "PortfolioSummary",
    "PriceRentalUseCase",
]
