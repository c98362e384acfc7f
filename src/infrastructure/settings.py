"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os

from src.domain.constants import (
    DEFAULT_CLAIM_RATE,
    DEFAULT_DAILY_RATE,
    DEFAULT_LINE_TOLERANCE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_VAT_RATE,
    DEFAULT_WEEKLY_RATE,
)
from src.domain.policies import BillingPolicy
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BillingSettings:
    """Settings for billing rates and report layout.

    Attributes:
        vat_rate: VAT fraction, e.g. 0.20.
        claim_rate: Daily claim hire rate.
        default_daily_rate: Fallback daily vehicle rate.
        default_weekly_rate: Fallback weekly vehicle rate.
        page_size: Records per report page.
        line_tolerance: Rounding tolerance per invoice line.
    """

    vat_rate: Decimal = DEFAULT_VAT_RATE
    claim_rate: Decimal = DEFAULT_CLAIM_RATE
    default_daily_rate: Decimal = DEFAULT_DAILY_RATE
    default_weekly_rate: Decimal = DEFAULT_WEEKLY_RATE
    page_size: int = DEFAULT_PAGE_SIZE
    line_tolerance: Decimal = DEFAULT_LINE_TOLERANCE

    @classmethod
    def from_env(cls) -> "BillingSettings":
        """Build settings from environment variables.

        Returns:
            BillingSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        return cls(
            vat_rate=cls._read_decimal(
                "BILLING_VAT_RATE", DEFAULT_VAT_RATE, logger, allow_zero=True
            ),
            claim_rate=cls._read_decimal(
                "BILLING_CLAIM_RATE", DEFAULT_CLAIM_RATE, logger
            ),
            default_daily_rate=cls._read_decimal(
                "BILLING_DEFAULT_DAILY_RATE", DEFAULT_DAILY_RATE, logger
            ),
            default_weekly_rate=cls._read_decimal(
                "BILLING_DEFAULT_WEEKLY_RATE", DEFAULT_WEEKLY_RATE, logger
            ),
            page_size=cls._read_page_size(logger),
            line_tolerance=cls._read_decimal(
                "BILLING_LINE_TOLERANCE", DEFAULT_LINE_TOLERANCE, logger
            ),
        )

    def to_policy(self) -> BillingPolicy:
        """Return the billing policy described by these settings."""
        return BillingPolicy(
            vat_rate=self.vat_rate,
            claim_rate=self.claim_rate,
            default_daily_rate=self.default_daily_rate,
            default_weekly_rate=self.default_weekly_rate,
            page_size=self.page_size,
            line_tolerance=self.line_tolerance,
        )

    @staticmethod
    def _read_decimal(
        name: str,
        default: Decimal,
        logger,
        allow_zero: bool = False,
    ) -> Decimal:
        """Read a positive decimal from the environment.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.
            allow_zero: Whether zero is accepted, as for a zero VAT rate.

        Returns:
            Decimal: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(f"Invalid {name}='{raw}', using {default}")
            return default
        if (
            not value.is_finite()
            or value < 0
            or (value == 0 and not allow_zero)
        ):
            logger.warning(f"Invalid {name}='{raw}', using {default}")
            return default
        return value

    @staticmethod
    def _read_page_size(logger) -> int:
        raw = os.getenv("BILLING_PAGE_SIZE")
        if raw is None or not raw.strip():
            return DEFAULT_PAGE_SIZE
        try:
            value = int(raw.strip())
        except ValueError:
            value = 0
        if value < 1:
            logger.warning(
                f"Invalid BILLING_PAGE_SIZE='{raw}', using {DEFAULT_PAGE_SIZE}"
            )
            return DEFAULT_PAGE_SIZE
        return value


__all__ = ["BillingSettings"]
