"""Domain model for VD claim finance figures."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class VDFinanceValues:
    """Split of a VAT-inclusive VD claim settlement.

    Attributes:
        net_amount: Settlement total without VAT.
        vat_in: VAT contained in the settlement total.
        solicitor_fee: Fee owed to the solicitor, capped.
        client_repair: Client's share of the net left after purchases.
        profit: Net minus purchased items and the client repair share.
    """

    net_amount: Decimal
    vat_in: Decimal
    solicitor_fee: Decimal
    client_repair: Decimal
    profit: Decimal


__all__ = ["VDFinanceValues"]
