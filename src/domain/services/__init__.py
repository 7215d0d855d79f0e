"""Domain services package."""

from .account_tree import build_account_tree
from .report_navigation import (
    ReportNavigator,
    breadcrumb_to,
    breadcrumbs,
    drill_into,
    select_report,
    title_for,
)

__all__ = [
    "build_account_tree",
    "ReportNavigator",
    "breadcrumb_to",
    "breadcrumbs",
    "drill_into",
    "select_report",
    "title_for",
]
