"""Tests for invoice line item calculations."""

from decimal import Decimal

import pytest

from src.domain.errors import ValidationError
from src.domain.models import LineItem
from src.domain.policies import BillingPolicy
from src.domain.services.line_items import compute_line


def test_compute_line_applies_discount_before_vat() -> None:
    """2 x 50 with 10% discount and VAT should total 108."""
    item = LineItem(
        description="Hire",
        quantity=Decimal("2"),
        unit_price=Decimal("50"),
        discount=Decimal("10"),
        include_vat=True,
    )

    totals = compute_line(item)

    assert totals.gross == Decimal("100")
    assert totals.discount_amount == Decimal("10")
    assert totals.net_after_discount == Decimal("90")
    assert totals.vat_amount == Decimal("18")
    assert totals.total_line == Decimal("108")


@pytest.mark.parametrize(
    ("quantity", "unit_price"),
    [
        (Decimal("0"), Decimal("99.99")),
        (Decimal("3"), Decimal("19.99")),
        (Decimal("1.5"), Decimal("40")),
        (Decimal("12"), Decimal("0.01")),
    ],
)
def test_compute_line_without_discount_or_vat_is_quantity_times_price(
    quantity,
    unit_price,
) -> None:
    """Plain lines should total quantity times unit price."""
    item = LineItem("Part", quantity, unit_price)

    totals = compute_line(item)

    assert totals.total_line == quantity * unit_price
    assert totals.vat_amount == Decimal("0")


@pytest.mark.parametrize(
    "item",
    [
        LineItem("Part", Decimal("3"), Decimal("33.33"), Decimal("7.5"), True),
        LineItem("Part", Decimal("1"), Decimal("0.07"), Decimal("0"), True),
        LineItem("Part", Decimal("4"), Decimal("12.5"), Decimal("100"), True),
    ],
)
def test_compute_line_vat_is_exactly_a_fifth_of_net(item) -> None:
    """VAT should be exactly 20% of the discounted amount."""
    totals = compute_line(item)

    assert totals.vat_amount == totals.net_after_discount * Decimal("0.20")
    assert totals.total_line == totals.net_after_discount + totals.vat_amount


def test_compute_line_is_pure() -> None:
    """Computing the same line twice should yield identical results."""
    item = LineItem("Labour", Decimal("2"), Decimal("45"), Decimal("5"), True)

    assert compute_line(item) == compute_line(item)


def test_compute_line_uses_policy_vat_rate() -> None:
    """The VAT rate should come from the policy."""
    item = LineItem("Labour", Decimal("1"), Decimal("100"), include_vat=True)

    totals = compute_line(item, BillingPolicy(vat_rate=Decimal("0.05")))

    assert totals.vat_amount == Decimal("5")


def test_compute_line_accepts_numeric_inputs() -> None:
    """Integers and floats should be converted to Decimal."""
    totals = compute_line(LineItem("Fuel", 2, 1.25))

    assert totals.total_line == Decimal("2.50")


@pytest.mark.parametrize(
    "item",
    [
        LineItem("Part", Decimal("-1"), Decimal("10")),
        LineItem("Part", Decimal("1"), Decimal("-10")),
        LineItem("Part", Decimal("1"), Decimal("10"), Decimal("-1")),
        LineItem("Part", Decimal("1"), Decimal("10"), Decimal("150")),
        LineItem("Part", None, Decimal("10")),
        LineItem("Part", "abc", Decimal("10")),
    ],
)
def test_compute_line_rejects_invalid_input(item) -> None:
    """Invalid numbers should raise instead of being coerced."""
    with pytest.raises(ValidationError):
        compute_line(item)
