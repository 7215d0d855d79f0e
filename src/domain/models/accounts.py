"""Domain models for the account hierarchy."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class AccountRecord:
    """Flat account record as decoded from the backend.

    Attributes:
        account_id: Identifier assigned by the backend.
        parent_account_id: Identifier of the parent, or None for roots.
        name: Display name.
    """

    account_id: int
    parent_account_id: int | None
    name: str

    def is_root_account(self) -> bool:
        """Return True when the record has no parent."""
        return self.parent_account_id is None


@dataclass(frozen=True)
class Account:
    """Account node with its direct children in render order."""

    account_id: int
    parent_account_id: int | None
    name: str
    children: tuple["Account", ...] = ()

    def is_root_account(self) -> bool:
        return self.parent_account_id is None


@dataclass(frozen=True)
class AccountTree:
    """Assembled forest of accounts plus an identifier index.

    Attributes:
        forest: Root accounts in input order.
        index: Read-only mapping from account identifier to node.
    """

    forest: tuple[Account, ...]
    index: Mapping[int, Account]

    def __len__(self) -> int:
        return len(self.index)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self.index

    def get(self, account_id: int) -> Account:
        """Return the account with the given identifier.

        Raises:
            KeyError: If no account has this identifier.
        """
        return self.index[account_id]

    def walk(self) -> Iterator[tuple[int, Account]]:
        """Yield ``(depth, account)`` pairs depth-first in render order."""
        stack = [(0, root) for root in reversed(self.forest)]
        while stack:
            depth, account = stack.pop()
            yield depth, account
            stack.extend(
                (depth + 1, child) for child in reversed(account.children)
            )

    def ancestors(self, account_id: int) -> tuple[Account, ...]:
        """Return the ancestors of an account, root first.

        Raises:
            KeyError: If no account has this identifier.
        """
        chain: list[Account] = []
        parent_id = self.index[account_id].parent_account_id
        while parent_id is not None:
            parent = self.index[parent_id]
            chain.append(parent)
            parent_id = parent.parent_account_id
        return tuple(reversed(chain))


__all__ = ["AccountRecord", "Account", "AccountTree"]
