"""Composition root for wiring infrastructure adapters."""

from collections.abc import Mapping

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.reports_repository import ReportsRepositoryPort
from src.application.use_cases.get_accounts_tree import GetAccountsTreeUseCase
from src.application.use_cases.open_report import OpenReportUseCase
from src.domain.services.report_navigation import ReportNavigator
from src.infrastructure.accounts_repository import SqlAlchemyAccountsRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.json_repositories import (
    AccountsFetcher,
    JsonAccountsRepository,
    JsonReportsRepository,
    ReportFetcher,
)
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from src.infrastructure.settings import ClientSettings


def build_settings() -> ClientSettings:
    """Return settings and apply the configured log level."""
    settings = ClientSettings.from_env()
    get_app_logger().set_level(settings.log_level)
    return settings


def build_database_adapter(
    settings: ClientSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or build_settings()
    return SqlAlchemyDatabaseEngineAdapter(resolved.accounts_db_url)


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    """Return the SQLAlchemy accounts repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsRepository(resolved_db)


def build_get_accounts_tree_use_case(
    repository: AccountsRepositoryPort | None = None,
) -> GetAccountsTreeUseCase:
    """Return the accounts tree use case."""
    resolved = repository or build_accounts_repository()
    return GetAccountsTreeUseCase(resolved, logger=get_app_logger())


def build_report_navigator() -> ReportNavigator:
    """Return a navigator that records navigation on the usage logger."""
    return ReportNavigator(logger=get_usage_logger())


def build_json_accounts_repository(
    fetch: AccountsFetcher,
) -> AccountsRepositoryPort:
    """Return an accounts repository decoding the host's account-list fetch."""
    return JsonAccountsRepository(fetch)


def build_reports_repository(
    fetch: ReportFetcher,
    top_level_account_names: Mapping[int | str, str] | None = None,
) -> ReportsRepositoryPort:
    """Return a reports repository decoding the host's tabulation fetch."""
    return JsonReportsRepository(fetch, top_level_account_names)


def build_open_report_use_case(
    fetch: ReportFetcher,
    navigator: ReportNavigator | None = None,
    top_level_account_names: Mapping[int | str, str] | None = None,
) -> OpenReportUseCase:
    """Return the open report use case over the host's tabulation fetch."""
    return OpenReportUseCase(
        build_reports_repository(fetch, top_level_account_names),
        navigator or build_report_navigator(),
        settings=build_settings(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_accounts_repository",
    "build_json_accounts_repository",
    "build_reports_repository",
    "build_get_accounts_tree_use_case",
    "build_report_navigator",
    "build_open_report_use_case",
]
