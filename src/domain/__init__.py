"""Domain package for the account hierarchy and report navigation."""

from .exceptions import (
    BackendError,
    DecodeError,
    FinanceClientError,
    IntegrityError,
    NavigationError,
)
from .models import (
    Account,
    AccountRecord,
    AccountTree,
    Breadcrumb,
    Report,
    SelectedReport,
    Series,
)
from .services import ReportNavigator, build_account_tree

__all__ = [
    "Account",
    "AccountRecord",
    "AccountTree",
    "Breadcrumb",
    "Report",
    "SelectedReport",
    "Series",
    "ReportNavigator",
    "build_account_tree",
    "BackendError",
    "DecodeError",
    "FinanceClientError",
    "IntegrityError",
    "NavigationError",
]
