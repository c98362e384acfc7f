"""Engine management for the fleet operations database.

The fleet database holds vehicles, invoices with their line items and the
income/expense ledger. Its URL comes from ``FLEET_DB_URL``, read from the
process environment or a local ``.env`` file. One pooled engine is shared by
every repository in the process.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Return a required setting, loading ``.env`` before looking it up.

    Args:
        name: Setting name, e.g. ``FLEET_DB_URL``.

    Returns:
        str: Configured value.

    Raises:
        RuntimeError: If the setting is unset or blank.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Open a pooled engine on the fleet database with pre-ping enabled.

    Args:
        db_url: SQLAlchemy URL of the fleet database.

    Returns:
        Engine: Engine with at most ten pooled connections.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_fleet_engine: Optional[Engine] = None


def get_fleet_engine() -> Engine:
    """Return the process-wide fleet engine, creating it on first use."""
    global _fleet_engine
    if _fleet_engine is None:
        db_url = _get_env_var("FLEET_DB_URL")
        _fleet_engine = _create_engine(db_url)
    return _fleet_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Hand the shared fleet engine to billing repositories."""

    def get_fleet_engine(self) -> Engine:
        return get_fleet_engine()


__all__ = ["get_fleet_engine", "SqlAlchemyDatabaseEngineAdapter"]
