"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import logging
import os
from typing import Optional

from src.infrastructure.logging.logger import get_app_logger


DEFAULT_REPORT_ID = "monthly_expenses"


@dataclass(frozen=True)
class ClientSettings:
    """Settings for the finance client core.

    Attributes:
        accounts_db_url: Optional SQLAlchemy URL of the accounts store.
        default_report_id: Report opened when none is requested.
        log_level: Name of the application log level.
    """

    accounts_db_url: Optional[str] = None
    default_report_id: str = DEFAULT_REPORT_ID
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Build settings from environment variables.

        Returns:
            ClientSettings: Settings sourced from environment variables.
        """
        accounts_db_url = os.getenv("ACCOUNTS_DB_URL") or None
        default_report_id = (
            os.getenv("DEFAULT_REPORT_ID", "").strip() or DEFAULT_REPORT_ID
        )
        log_level = cls._normalize_level(
            os.getenv("LOG_LEVEL", "INFO"),
            logger=get_app_logger(),
        )
        return cls(
            accounts_db_url=accounts_db_url,
            default_report_id=default_report_id,
            log_level=log_level,
        )

    @staticmethod
    def _normalize_level(raw_level: str, logger) -> str:
        """Normalize a log level name, falling back to INFO.

        Args:
            raw_level: Raw level name from the environment.
            logger: Logger used for warnings.

        Returns:
            str: Upper-case level name known to the logging module.
        """
        level = raw_level.strip().upper()
        if level not in logging.getLevelNamesMapping():
            logger.warning(f"Unknown LOG_LEVEL {raw_level!r}, using INFO")
            return "INFO"
        return level


__all__ = ["ClientSettings", "DEFAULT_REPORT_ID"]
