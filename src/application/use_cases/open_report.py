"""Use case to load a report and reset drill-down to its top level."""

from src.application.ports.reports_repository import ReportsRepositoryPort
from src.domain.models.navigation import SelectedReport
from src.domain.services.report_navigation import ReportNavigator
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import ClientSettings


class OpenReportUseCase:
    """Fetch a report tabulation and make it the navigator's active report."""

    def __init__(
        self,
        repository: ReportsRepositoryPort,
        navigator: ReportNavigator,
        settings: ClientSettings | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port returning report tabulations.
            navigator: Navigator receiving the fetched report.
            settings: Settings providing the default report identifier.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._navigator = navigator
        self._settings = settings or ClientSettings.from_env()
        self._logger = logger or get_app_logger()

    def execute(self, report_id: int | str | None = None) -> SelectedReport:
        """Select the requested report, or the default one, at its top level."""
        resolved_id = (
            report_id if report_id is not None
            else self._settings.default_report_id
        )
        report = self._repository.fetch_report(resolved_id)
        self._logger.info(f"Opened report {resolved_id}: {report.title}")
        return self._navigator.select_report(report)


__all__ = ["OpenReportUseCase"]
