"""Application use cases package."""

from .get_accounts_tree import GetAccountsTreeUseCase
from .open_report import OpenReportUseCase

__all__ = ["GetAccountsTreeUseCase", "OpenReportUseCase"]
