"""Domain constants for fleet billing."""

from decimal import Decimal

DEFAULT_VAT_RATE = Decimal("0.20")
DEFAULT_CLAIM_RATE = Decimal("340")
DEFAULT_DAILY_RATE = Decimal("60")
DEFAULT_WEEKLY_RATE = Decimal("360")
DEFAULT_PAGE_SIZE = 10
DEFAULT_LINE_TOLERANCE = Decimal("0.01")

FREE_RENTAL_REASONS = ("staff", "o/d")

SOLICITOR_FEE_RATE = Decimal("0.10")
SOLICITOR_FEE_CAP = Decimal("500")
CLIENT_REPAIR_RATE = Decimal("0.20")


__all__ = [
    "DEFAULT_VAT_RATE",
    "DEFAULT_CLAIM_RATE",
    "DEFAULT_DAILY_RATE",
    "DEFAULT_WEEKLY_RATE",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_LINE_TOLERANCE",
    "FREE_RENTAL_REASONS",
    "SOLICITOR_FEE_RATE",
    "SOLICITOR_FEE_CAP",
    "CLIENT_REPAIR_RATE",
]
