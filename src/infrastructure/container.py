"""Composition root for wiring infrastructure adapters."""

from src.application.ports.billing_repository import BillingRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.application.use_cases.get_invoice_breakdown import (
    GetInvoiceBreakdownUseCase,
)
from src.application.use_cases.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
)
from src.application.use_cases.price_rental import PriceRentalUseCase
from src.domain.policies import BillingPolicy
from src.infrastructure.billing_repository import SqlAlchemyBillingRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BillingSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_billing_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BillingRepositoryPort:
    """Return the billing records repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBillingRepository(resolved_db)


def build_billing_policy() -> BillingPolicy:
    """Return the billing policy configured through the environment."""
    return BillingSettings.from_env().to_policy()


def build_price_rental_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> PriceRentalUseCase:
    """Return the rental pricing use case."""
    return PriceRentalUseCase(
        build_billing_repository(db_port),
        logger=get_app_logger(),
        policy=build_billing_policy(),
    )


def build_invoice_breakdown_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetInvoiceBreakdownUseCase:
    """Return the invoice breakdown use case."""
    return GetInvoiceBreakdownUseCase(
        build_billing_repository(db_port),
        logger=get_app_logger(),
        policy=build_billing_policy(),
    )


def build_financial_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetFinancialSummaryUseCase:
    """Return the period financial summary use case."""
    return GetFinancialSummaryUseCase(
        build_billing_repository(db_port),
        logger=get_app_logger(),
    )


def build_portfolio_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetPortfolioSummaryUseCase:
    """Return the invoice portfolio summary use case."""
    return GetPortfolioSummaryUseCase(
        build_billing_repository(db_port),
        logger=get_app_logger(),
        policy=build_billing_policy(),
    )


__all__ = [
    "build_database_adapter",
    "build_billing_repository",
    "build_billing_policy",
    "build_price_rental_use_case",
    "build_invoice_breakdown_use_case",
    "build_financial_summary_use_case",
    "build_portfolio_summary_use_case",
]
