"""Tests for the SQLAlchemy accounts repository."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from sqlalchemy import create_engine, text

from src.domain.models.accounts import AccountRecord
from src.infrastructure.accounts_repository import SqlAlchemyAccountsRepository


def _build_db_port(rows: list[SimpleNamespace]) -> MagicMock:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.return_value.all.return_value = rows

    db_port = MagicMock()
    db_port.get_accounts_engine.return_value = engine
    return db_port


def test_fetch_accounts_maps_rows_and_root_sentinel() -> None:
    """Rows should become records with -1 parents mapped to None."""
    rows = [
        SimpleNamespace(AccountId=1, ParentAccountId=-1, Name="Assets"),
        SimpleNamespace(AccountId=2, ParentAccountId=1, Name="Checking"),
        SimpleNamespace(AccountId=3, ParentAccountId=None, Name="Income"),
    ]
    db_port = _build_db_port(rows)

    result = SqlAlchemyAccountsRepository(db_port).fetch_accounts()

    assert result == [
        AccountRecord(1, None, "Assets"),
        AccountRecord(2, 1, "Checking"),
        AccountRecord(3, None, "Income"),
    ]
    db_port.get_accounts_engine.assert_called_once()


def test_fetch_accounts_reads_sqlite_table() -> None:
    """The query should run against a real accounts table."""
    engine = create_engine("sqlite://", future=True)
    with engine.begin() as conn:
        conn.execute(
            text(
                "CREATE TABLE accounts ("
                "AccountId INTEGER PRIMARY KEY, "
                "ParentAccountId INTEGER, "
                "Name TEXT)"
            )
        )
        conn.execute(
            text(
                "INSERT INTO accounts (AccountId, ParentAccountId, Name) "
                "VALUES (:id, :parent, :name)"
            ),
            [
                {"id": 2, "parent": 1, "name": "Checking"},
                {"id": 1, "parent": -1, "name": "Assets"},
            ],
        )
    db_port = MagicMock()
    db_port.get_accounts_engine.return_value = engine

    result = SqlAlchemyAccountsRepository(db_port).fetch_accounts()

    assert result == [
        AccountRecord(1, None, "Assets"),
        AccountRecord(2, 1, "Checking"),
    ]
