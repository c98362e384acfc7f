"""Table definitions for the fleet records read by the billing engine."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
)

metadata = MetaData()

vehicles_table = Table(
    "vehicles",
    metadata,
    Column("id", String, primary_key=True),
    Column("registration", String),
    Column("daily_rental_rate", Numeric(12, 2)),
    Column("weekly_rental_rate", Numeric(12, 2)),
)

invoices_table = Table(
    "invoices",
    metadata,
    Column("id", String, primary_key=True),
    Column("customer_name", String),
    Column("issued_on", DateTime),
    Column("due_date", DateTime, nullable=False),
    Column("subtotal", Numeric(12, 2)),
    Column("vat_amount", Numeric(12, 2)),
    Column("total", Numeric(12, 2), nullable=False),
    Column("paid_amount", Numeric(12, 2), nullable=False),
    Column("remaining_amount", Numeric(12, 2), nullable=False),
    Column("payment_status", String, nullable=False),
)

invoice_line_items_table = Table(
    "invoice_line_items",
    metadata,
    Column("invoice_id", String, nullable=False),
    Column("position", Integer, nullable=False),
    Column("description", String, nullable=False),
    Column("quantity", Numeric(12, 3), nullable=False),
    Column("unit_price", Numeric(12, 2), nullable=False),
    Column("discount", Numeric(5, 2), nullable=False, default=0),
    Column("include_vat", Boolean, nullable=False, default=False),
)

transactions_table = Table(
    "transactions",
    metadata,
    Column("id", String, primary_key=True),
    Column("type", String, nullable=False),
    Column("amount", Numeric(12, 2), nullable=False),
    Column("date", DateTime, nullable=False),
    Column("payment_status", String),
    Column("category", String),
    Column("description", String),
)


__all__ = [
    "metadata",
    "vehicles_table",
    "invoices_table",
    "invoice_line_items_table",
    "transactions_table",
]
