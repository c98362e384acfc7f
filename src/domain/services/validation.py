"""Domain validation helpers."""

from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from logging import Logger

from src.domain.errors import ValidationError
from src.domain.models import LineItem
from src.utils.decimal_utils import coerce_decimal


def require_decimal(name: str, value) -> Decimal:
    """Convert a numeric input to Decimal or reject it.

    Args:
        name: Field name used in the error message.
        value: Raw numeric value.

    Returns:
        Decimal: The converted value.

    Raises:
        ValidationError: If the value is missing or not a finite number.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    try:
        converted = coerce_decimal(value)
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(
            f"{name} must be a number, got {value!r}"
        ) from exc
    if not converted.is_finite():
        raise ValidationError(f"{name} must be finite, got {value!r}")
    return converted


def require_non_negative(name: str, value) -> Decimal:
    """Return value as Decimal, rejecting negative amounts."""
    converted = require_decimal(name, value)
    if converted < 0:
        raise ValidationError(f"{name} must not be negative: {converted}")
    return converted


def require_percentage(name: str, value) -> Decimal:
    """Return value as Decimal, rejecting values outside [0, 100]."""
    converted = require_decimal(name, value)
    if converted < 0 or converted > 100:
        raise ValidationError(
            f"{name} must be between 0 and 100: {converted}"
        )
    return converted


def require_instant(name: str, value) -> datetime:
    """Normalize a date or datetime into a datetime.

    Args:
        name: Field name used in the error message.
        value: A datetime, or a date promoted to midnight.

    Returns:
        datetime: Normalized instant.

    Raises:
        ValidationError: If the value is neither a date nor a datetime.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raise ValidationError(f"{name} must be a date or datetime, got {value!r}")


def require_period_end(name: str, value) -> datetime:
    """Normalize an inclusive period end.

    A plain date covers the whole day, so it is promoted to the last
    instant of that day rather than midnight.

    Raises:
        ValidationError: If the value is neither a date nor a datetime.
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.max)
    return require_instant(name, value)


def validate_line_item(item: LineItem) -> tuple[Decimal, Decimal, Decimal]:
    """Validate a line item and return its normalized numeric fields.

    Returns:
        tuple[Decimal, Decimal, Decimal]: quantity, unit price, discount.
    """
    quantity = require_non_negative("quantity", item.quantity)
    unit_price = require_non_negative("unit_price", item.unit_price)
    discount = require_percentage("discount", item.discount)
    return quantity, unit_price, discount


def warn_on_overpayment(
    invoice_id: str,
    owing: Decimal,
    logger: Logger | None,
) -> None:
    """Warn when an invoice has been paid beyond its total.

    Args:
        invoice_id: Identifier used in the log message.
        owing: Raw total minus paid amount.
        logger: Optional logger used for warnings.
    """
    if owing < 0 and logger is not None:
        logger.warning(
            f"Invoice {invoice_id} is overpaid by {abs(owing)}"
        )


__all__ = [
    "require_decimal",
    "require_non_negative",
    "require_percentage",
    "require_instant",
    "require_period_end",
    "validate_line_item",
    "warn_on_overpayment",
]
