"""Database ports for the finance client.

This module defines the application-layer protocol for accessing the
database engine that mirrors backend accounts. Infrastructure
implementations are expected to provide concrete adapters that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the accounts database engine.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_accounts_engine(self) -> Engine:
        """Get the engine for the accounts database.

        Returns:
            Engine: SQLAlchemy engine connected to the accounts store.
        """


__all__ = ["DatabaseEnginePort"]
