"""Domain services package."""

from .invoices import aggregate_invoice, is_overdue, settle_payment
from .line_items import compute_line
from .maintenance import calculate_maintenance_costs
from .periods import (
    align_weekly_end,
    month_bounds,
    next_monday,
    period_bounds,
    resolve_end,
    week_bounds,
    year_bounds,
)
from .portfolio import page_count, paginate, summarize_portfolio
from .pricing import (
    apply_hire_charges,
    calculate_discount,
    calculate_overdue_cost,
    price_rental,
)
from .rates import resolve_rate, resolve_request_rate
from .summaries import summarize_month, summarize_period
from .vd_finance import (
    calculate_parts_total,
    calculate_vat_out,
    calculate_vd_finance_values,
)

__all__ = [
    "aggregate_invoice",
    "is_overdue",
    "settle_payment",
    "compute_line",
    "calculate_maintenance_costs",
    "align_weekly_end",
    "month_bounds",
    "next_monday",
    "period_bounds",
    "resolve_end",
    "week_bounds",
    "year_bounds",
    "page_count",
    "paginate",
    "summarize_portfolio",
    "apply_hire_charges",
    "calculate_discount",
    "calculate_overdue_cost",
    "price_rental",
    "resolve_rate",
    "resolve_request_rate",
    "summarize_month",
    "summarize_period",
    "calculate_parts_total",
    "calculate_vat_out",
    "calculate_vd_finance_values",
]
