"""Database ports for the fleet billing engine.

This module defines the application-layer protocol for accessing the fleet
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the fleet operations database.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_fleet_engine(self) -> Engine:
        """Get the engine for the fleet database.

        Returns:
            Engine: SQLAlchemy engine connected to the fleet records.
        """


__all__ = ["DatabaseEnginePort"]
