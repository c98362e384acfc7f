"""SQLAlchemy-backed repository for billing records."""

from collections import defaultdict
from datetime import date, datetime

from sqlalchemy import select

from src.application.ports.billing_repository import (
    BillingRepositoryPort,
    RecordNotFoundError,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import (
    Invoice,
    LineItem,
    PaymentStatus,
    Transaction,
    TransactionType,
    Vehicle,
)
from src.domain.services.validation import (
    require_instant,
    require_period_end,
)
from src.infrastructure.schema import (
    invoice_line_items_table,
    invoices_table,
    transactions_table,
    vehicles_table,
)
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


class SqlAlchemyBillingRepository(BillingRepositoryPort):
    """Repository reading vehicles, invoices and transactions."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the fleet engine.
        """
        self._db_port = db_port

    def fetch_vehicle(self, vehicle_id: str) -> Vehicle:
        query = select(vehicles_table).where(vehicles_table.c.id == vehicle_id)
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            row = conn.execute(query).first()
        if row is None:
            raise RecordNotFoundError(f"Unknown vehicle: {vehicle_id}")
        return Vehicle(
            vehicle_id=row.id,
            daily_rental_rate=coerce_optional_decimal(row.daily_rental_rate),
            weekly_rental_rate=coerce_optional_decimal(row.weekly_rental_rate),
            registration=row.registration,
        )

    def fetch_invoice(self, invoice_id: str) -> Invoice:
        query = select(invoices_table).where(invoices_table.c.id == invoice_id)
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            row = conn.execute(query).first()
            if row is None:
                raise RecordNotFoundError(f"Unknown invoice: {invoice_id}")
            line_items = self._fetch_line_items(conn, [invoice_id])
        return self._to_invoice(row, line_items.get(invoice_id, []))

    def fetch_invoices(self) -> list[Invoice]:
        query = select(invoices_table).order_by(
            invoices_table.c.due_date,
            invoices_table.c.id,
        )
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
            line_items = self._fetch_line_items(
                conn,
                [row.id for row in rows],
            )
        return [
            self._to_invoice(row, line_items.get(row.id, []))
            for row in rows
        ]

    def fetch_transactions(
        self,
        start: datetime | None,
        end: datetime | None,
    ) -> list[Transaction]:
        query = select(transactions_table)
        if start is not None:
            start = require_instant("start", start)
            query = query.where(transactions_table.c.date >= start)
        if end is not None:
            # A plain end date includes the whole day.
            end = require_period_end("end", end)
            query = query.where(transactions_table.c.date <= end)
        query = query.order_by(
            transactions_table.c.date,
            transactions_table.c.id,
        )
        engine = self._db_port.get_fleet_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            Transaction(
                type=TransactionType(row.type),
                amount=coerce_decimal(row.amount),
                date=self._to_instant(row.date),
                payment_status=row.payment_status,
                category=row.category,
                description=row.description,
            )
            for row in rows
        ]

    @staticmethod
    def _fetch_line_items(
        conn,
        invoice_ids: list[str],
    ) -> dict[str, list[LineItem]]:
        if not invoice_ids:
            return {}
        query = (
            select(invoice_line_items_table)
            .where(invoice_line_items_table.c.invoice_id.in_(invoice_ids))
            .order_by(
                invoice_line_items_table.c.invoice_id,
                invoice_line_items_table.c.position,
            )
        )
        grouped: dict[str, list[LineItem]] = defaultdict(list)
        for row in conn.execute(query).all():
            grouped[row.invoice_id].append(
                LineItem(
                    description=row.description,
                    quantity=coerce_decimal(row.quantity),
                    unit_price=coerce_decimal(row.unit_price),
                    discount=coerce_decimal(row.discount),
                    include_vat=bool(row.include_vat),
                )
            )
        return dict(grouped)

    @classmethod
    def _to_invoice(cls, row, line_items: list[LineItem]) -> Invoice:
        return Invoice(
            invoice_id=row.id,
            total=coerce_decimal(row.total),
            paid_amount=coerce_decimal(row.paid_amount),
            remaining_amount=coerce_decimal(row.remaining_amount),
            due_date=cls._to_instant(row.due_date),
            payment_status=PaymentStatus(row.payment_status),
            line_items=line_items,
            subtotal=coerce_optional_decimal(row.subtotal),
            vat_amount=coerce_optional_decimal(row.vat_amount),
            issued_on=(
                cls._to_instant(row.issued_on)
                if row.issued_on is not None
                else None
            ),
            customer_name=row.customer_name,
        )

    @staticmethod
    def _to_instant(value) -> datetime:
        """Convert stored date representations into a datetime.

        Args:
            value: datetime, date or ISO-8601 string from the database.

        Returns:
            datetime: Normalized instant.
        """
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        return datetime.fromisoformat(str(value))


__all__ = ["SqlAlchemyBillingRepository"]
