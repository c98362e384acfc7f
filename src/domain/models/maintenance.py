"""Domain models for maintenance job costing."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class MaintenancePart:
    """Part fitted during a maintenance job."""

    name: str
    quantity: Decimal
    cost: Decimal
    include_vat: bool = False


@dataclass(frozen=True)
class MaintenanceCostBreakdown:
    """Parts and labour totals for a maintenance job."""

    net_amount: Decimal
    vat_amount: Decimal
    parts_total: Decimal
    labor_total: Decimal

    @property
    def total_amount(self) -> Decimal:
        """Return net plus VAT."""
        return self.net_amount + self.vat_amount


__all__ = ["MaintenancePart", "MaintenanceCostBreakdown"]
