"""Domain policies package."""

from .billing_policy import DEFAULT_BILLING_POLICY, BillingPolicy

__all__ = ["BillingPolicy", "DEFAULT_BILLING_POLICY"]
