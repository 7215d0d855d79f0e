"""Use case to assemble the accounts tree for nested account lists."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.domain.exceptions import IntegrityError
from src.domain.models.accounts import AccountTree
from src.domain.services.account_tree import build_account_tree
from src.infrastructure.logging.logger import get_app_logger


class GetAccountsTreeUseCase:
    """Fetch flat accounts and assemble them into a validated forest.

    The tree is rebuilt from scratch on every call, so hosts run this after
    each account creation, update or deletion.
    """

    def __init__(
        self,
        repository: AccountsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port returning flat account records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> AccountTree:
        """Return the assembled accounts tree.

        Raises:
            IntegrityError: If the fetched records do not form a forest.
                Hosts should keep rendering their last good tree.
        """
        records = self._repository.fetch_accounts()
        self._logger.info(f"Fetched {len(records)} accounts")
        try:
            return build_account_tree(records, logger=self._logger)
        except IntegrityError as exc:
            self._logger.error(
                f"Rejected accounts snapshot [{exc.code}]: {exc}"
            )
            raise


__all__ = ["GetAccountsTreeUseCase"]
