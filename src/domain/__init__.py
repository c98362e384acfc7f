"""Domain package for billing rules and core models."""

from .errors import ValidationError
from .policies import DEFAULT_BILLING_POLICY, BillingPolicy

__all__ = ["ValidationError", "BillingPolicy", "DEFAULT_BILLING_POLICY"]
