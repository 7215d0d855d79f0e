"""Domain models package."""

from .accounts import Account, AccountRecord, AccountTree
from .navigation import Breadcrumb, SelectedReport
from .reports import Report, Series

__all__ = [
    "Account",
    "AccountRecord",
    "AccountTree",
    "Breadcrumb",
    "SelectedReport",
    "Report",
    "Series",
]
