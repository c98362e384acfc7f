"""CLI adapter printing the monthly financial and invoice portfolio report.

This module wires the reporting use cases to the concrete database adapter
and provides a simple command-line entry point. Amounts are printed with two
decimals and the profit margin with one.
"""

from datetime import date, datetime
import os

from src.domain.models import PeriodGranularity
from src.infrastructure.container import (
    build_database_adapter,
    build_financial_summary_use_case,
    build_portfolio_summary_use_case,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Print the financial summary and portfolio totals for a month."""
    logger = get_app_logger()
    raw_date = os.getenv("REPORT_DATE")
    report_date = _parse_date(raw_date, logger)
    if raw_date and report_date is None:
        return
    report_day = report_date or date.today()
    reference = datetime(report_day.year, report_day.month, report_day.day)
    get_usage_logger().info(f"Billing report requested for {reference:%Y-%m}")

    db_adapter = build_database_adapter()
    summary_use_case = build_financial_summary_use_case(db_adapter)
    summary = summary_use_case.execute_for_period(
        reference,
        PeriodGranularity.MONTH,
    )
    portfolio = build_portfolio_summary_use_case(db_adapter).execute(
        as_of=datetime.now()
    )

    print(f"Financial summary for {reference:%Y-%m}")
    print(
        f"income={summary.total_income:.2f}, "
        f"expenses={summary.total_expenses:.2f}, "
        f"net={summary.net_income:.2f}, "
        f"margin={summary.profit_margin:.1f}%"
    )
    print(
        f"Invoices: count={portfolio.invoice_count}, "
        f"total={portfolio.total_amount:.2f}, "
        f"paid={portfolio.total_paid:.2f}, "
        f"outstanding={portfolio.total_outstanding:.2f}, "
        f"overdue={portfolio.overdue_count}, "
        f"pages={portfolio.page_count}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
