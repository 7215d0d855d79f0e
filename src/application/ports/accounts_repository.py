"""Port for retrieving flat account records."""

from typing import Protocol

from src.domain.models.accounts import AccountRecord


class AccountsRepositoryPort(Protocol):
    """Port exposing every account of the signed-in user."""

    def fetch_accounts(self) -> list[AccountRecord]:
        """Return flat account records in render order."""


__all__ = ["AccountsRepositoryPort"]
