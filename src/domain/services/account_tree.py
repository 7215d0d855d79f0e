"""Assembly of flat account records into a validated forest."""

from collections.abc import Iterable
from logging import Logger
from types import MappingProxyType

from src.domain.exceptions import (
    AccountCycleError,
    DanglingParentError,
    DuplicateAccountError,
)
from src.domain.models.accounts import Account, AccountRecord, AccountTree


def build_account_tree(
    records: Iterable[AccountRecord],
    logger: Logger | None = None,
) -> AccountTree:
    """Assemble flat records into a forest and an identifier index.

    Children keep the relative input order of their records, and roots are
    returned in input order. The tree is rebuilt wholesale on every account
    change; nothing here patches an existing tree.

    Args:
        records: Flat account records in render order.
        logger: Optional logger for a summary line.

    Returns:
        AccountTree: Frozen forest and read-only index.

    Raises:
        DuplicateAccountError: If two records share an identifier.
        DanglingParentError: If a parent identifier matches no record.
        AccountCycleError: If parent links loop without reaching a root.
    """
    records = list(records)

    by_id: dict[int, AccountRecord] = {}
    for record in records:
        if record.account_id in by_id:
            raise DuplicateAccountError(record.account_id)
        by_id[record.account_id] = record

    child_ids: dict[int, list[int]] = {account_id: [] for account_id in by_id}
    root_ids: list[int] = []
    for record in records:
        if record.is_root_account():
            root_ids.append(record.account_id)
        elif record.parent_account_id in child_ids:
            child_ids[record.parent_account_id].append(record.account_id)
        else:
            raise DanglingParentError(
                record.account_id,
                record.parent_account_id,
            )

    nodes = _freeze(by_id, child_ids, root_ids)

    for record in records:
        if record.account_id not in nodes:
            raise AccountCycleError(record.account_id)

    tree = AccountTree(
        forest=tuple(nodes[account_id] for account_id in root_ids),
        index=MappingProxyType(
            {record.account_id: nodes[record.account_id] for record in records}
        ),
    )
    if logger is not None:
        logger.debug(
            f"Built account tree with {len(records)} accounts "
            f"under {len(root_ids)} roots"
        )
    return tree


def _freeze(
    by_id: dict[int, AccountRecord],
    child_ids: dict[int, list[int]],
    root_ids: list[int],
) -> dict[int, Account]:
    """Create immutable nodes bottom-up for everything reachable from roots."""
    nodes: dict[int, Account] = {}
    stack = [(account_id, False) for account_id in root_ids]
    while stack:
        account_id, expanded = stack.pop()
        if not expanded:
            stack.append((account_id, True))
            stack.extend((child, False) for child in child_ids[account_id])
            continue
        record = by_id[account_id]
        nodes[account_id] = Account(
            account_id=record.account_id,
            parent_account_id=record.parent_account_id,
            name=record.name,
            children=tuple(nodes[child] for child in child_ids[account_id]),
        )
    return nodes


__all__ = ["build_account_tree"]
