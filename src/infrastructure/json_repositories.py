"""Repositories that decode backend JSON fetched by the host.

The host owns transport. It hands these repositories a callable that
returns the raw response body (text, bytes or parsed JSON) for a resource,
and the repositories run it through the decode boundary.
"""

from collections.abc import Callable, Mapping
from typing import Any

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.reports_repository import ReportsRepositoryPort
from src.domain.exceptions import BackendError
from src.domain.models.accounts import AccountRecord
from src.domain.models.reports import Report
from src.infrastructure.decoding import decode_account_list, decode_report


AccountsFetcher = Callable[[], Any]
ReportFetcher = Callable[[int | str], Any]


class JsonAccountsRepository(AccountsRepositoryPort):
    """Accounts repository backed by the backend's account-list response."""

    def __init__(self, fetch: AccountsFetcher) -> None:
        self._fetch = fetch

    def fetch_accounts(self) -> list[AccountRecord]:
        return decode_account_list(_call(self._fetch))


class JsonReportsRepository(ReportsRepositoryPort):
    """Reports repository backed by the backend's tabulation response."""

    def __init__(
        self,
        fetch: ReportFetcher,
        top_level_account_names: Mapping[int | str, str] | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            fetch: Callable returning the tabulation body for a report id.
            top_level_account_names: Optional top-level series name per
                report id, for tabulations that do not carry one.
        """
        self._fetch = fetch
        self._top_level_account_names = dict(top_level_account_names or {})

    def fetch_report(self, report_id: int | str) -> Report:
        payload = _call(self._fetch, report_id)
        return decode_report(
            payload,
            top_level_account_name=self._top_level_account_names.get(report_id),
        )


def _call(fetch: Callable[..., Any], *args: Any) -> Any:
    try:
        return fetch(*args)
    except OSError as exc:
        raise BackendError.request_failed(str(exc)) from exc


__all__ = ["JsonAccountsRepository", "JsonReportsRepository"]
