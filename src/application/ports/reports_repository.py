"""Port for retrieving tabulated reports."""

from typing import Protocol

from src.domain.models.reports import Report


class ReportsRepositoryPort(Protocol):
    """Port exposing report tabulations by identifier."""

    def fetch_report(self, report_id: int | str) -> Report:
        """Return the tabulated report with the given identifier."""


__all__ = ["ReportsRepositoryPort"]
