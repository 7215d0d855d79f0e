"""SQLAlchemy-backed repository for flat account records."""

from sqlalchemy import text

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.accounts import AccountRecord
from src.infrastructure.decoding import NO_PARENT_ACCOUNT_ID


SELECT_ACCOUNTS_SQL = text(
    """
    SELECT AccountId, ParentAccountId, Name
    FROM accounts
    ORDER BY AccountId
    """
)


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Repository backed by SQLAlchemy for the accounts table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the accounts engine.
        """
        self._db_port = db_port

    def fetch_accounts(self) -> list[AccountRecord]:
        """Return accounts ordered by identifier."""
        engine = self._db_port.get_accounts_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_ACCOUNTS_SQL).all()
        return [
            AccountRecord(
                account_id=row.AccountId,
                parent_account_id=_parent_id(row.ParentAccountId),
                name=row.Name,
            )
            for row in rows
        ]


def _parent_id(raw: int | None) -> int | None:
    if raw is None or raw == NO_PARENT_ACCOUNT_ID:
        return None
    return raw


__all__ = ["SqlAlchemyAccountsRepository"]
