"""Application ports package."""

from .billing_repository import BillingRepositoryPort, RecordNotFoundError
from .database import DatabaseEnginePort

__all__ = [
    "BillingRepositoryPort",
    "RecordNotFoundError",
    "DatabaseEnginePort",
]
