"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .database import DatabaseEnginePort
from .reports_repository import ReportsRepositoryPort

__all__ = [
    "AccountsRepositoryPort",
    "DatabaseEnginePort",
    "ReportsRepositoryPort",
]
