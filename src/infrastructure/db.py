"""SQLAlchemy engine wiring for the accounts store."""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


ACCOUNTS_DB_URL_VAR = "ACCOUNTS_DB_URL"
POOL_OPTIONS = {
    "poolclass": QueuePool,
    "pool_size": 5,
    "max_overflow": 5,
    "pool_pre_ping": True,
}


def _get_env_var(name: str) -> str:
    """Return ``name`` from the environment, after loading ``.env``.

    Raises:
        RuntimeError: If the variable is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    # In-process SQLite cannot share a queue pool across threads.
    if db_url.startswith("sqlite"):
        return create_engine(db_url, future=True)
    return create_engine(db_url, future=True, **POOL_OPTIONS)


_accounts_engine: Optional[Engine] = None


def get_accounts_engine() -> Engine:
    """Return the process-wide engine configured by ``ACCOUNTS_DB_URL``."""
    global _accounts_engine
    if _accounts_engine is None:
        _accounts_engine = _create_engine(_get_env_var(ACCOUNTS_DB_URL_VAR))
    return _accounts_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Accounts engine provider.

    With an explicit URL the adapter owns a dedicated engine; without one
    it defers to the shared engine from the environment.
    """

    def __init__(self, db_url: Optional[str] = None) -> None:
        self._engine = _create_engine(db_url) if db_url else None

    def get_accounts_engine(self) -> Engine:
        if self._engine is not None:
            return self._engine
        return get_accounts_engine()


__all__ = ["get_accounts_engine", "SqlAlchemyDatabaseEngineAdapter"]
