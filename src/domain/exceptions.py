"""Typed exceptions raised by the finance client core.

Every exception carries a machine-readable ``code`` class attribute and the
structured fields needed to report it, so callers catch by type and never
parse message strings.
"""

from collections.abc import Sequence


class FinanceClientError(Exception):
    """Base exception for all finance client errors."""

    code: str = "FINANCE_CLIENT_ERROR"


# Account tree


class IntegrityError(FinanceClientError):
    """Flat account records cannot be assembled into a valid forest."""

    code: str = "ACCOUNT_INTEGRITY"

    def __init__(self, account_id: int, reason: str) -> None:
        self.account_id = account_id
        self.reason = reason
        super().__init__(f"Account {account_id}: {reason}")


class DuplicateAccountError(IntegrityError):
    """Two records share the same account identifier."""

    code: str = "DUPLICATE_ACCOUNT"

    def __init__(self, account_id: int) -> None:
        super().__init__(account_id, "duplicate account identifier")


class DanglingParentError(IntegrityError):
    """A record references a parent that is not in the input set."""

    code: str = "DANGLING_PARENT"

    def __init__(self, account_id: int, parent_account_id: int | None) -> None:
        self.parent_account_id = parent_account_id
        super().__init__(
            account_id,
            f"parent {parent_account_id} does not exist",
        )


class AccountCycleError(IntegrityError):
    """A record is unreachable from every root because of a parent cycle."""

    code: str = "ACCOUNT_CYCLE"

    def __init__(self, account_id: int) -> None:
        super().__init__(account_id, "parent chain never reaches a root")


# Report navigation


class NavigationError(FinanceClientError):
    """A navigation event does not describe a valid descent path."""

    code: str = "INVALID_NAVIGATION"

    def __init__(self, series_traversal: Sequence[str], detail: str) -> None:
        self.series_traversal = tuple(series_traversal)
        self.detail = detail
        path = "/".join(self.series_traversal) or "<top level>"
        super().__init__(f"{detail} (at {path})")


# Backend payloads


class DecodeError(FinanceClientError):
    """A backend JSON payload is malformed."""

    code: str = "MALFORMED_PAYLOAD"

    def __init__(self, payload_kind: str, detail: str) -> None:
        self.payload_kind = payload_kind
        self.detail = detail
        super().__init__(f"Malformed {payload_kind} payload: {detail}")


REQUEST_FAILED_ERROR_ID = 5


class BackendError(FinanceClientError):
    """The backend answered with an error object instead of a resource."""

    code: str = "BACKEND_ERROR"

    def __init__(self, error_id: int, error_string: str) -> None:
        self.error_id = error_id
        self.error_string = error_string
        super().__init__(f"Backend error {error_id}: {error_string}")

    @classmethod
    def request_failed(cls, detail: str) -> "BackendError":
        """Build the client-side error for a request that never completed."""
        return cls(REQUEST_FAILED_ERROR_ID, f"Request Failed: {detail}")


__all__ = [
    "FinanceClientError",
    "IntegrityError",
    "DuplicateAccountError",
    "DanglingParentError",
    "AccountCycleError",
    "NavigationError",
    "DecodeError",
    "BackendError",
    "REQUEST_FAILED_ERROR_ID",
]
