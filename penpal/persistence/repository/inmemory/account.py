"""In-memory user account repository for testing."""

from typing import Any, Optional

from penpal.domain.model.account import UserAccount
from penpal.domain.repository.account import UserAccountRepository
from penpal.domain.value import AccountId


class InMemoryUserAccountRepository(UserAccountRepository):
    """In-memory implementation of UserAccountRepository for testing."""

    def __init__(self) -> None:
        self._accounts: dict[AccountId, UserAccount] = {}

    async def find_by_id(self, account_id: AccountId) -> Optional[UserAccount]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def save(self, account: UserAccount) -> UserAccount:
        """Save or replace an account."""
        self._accounts[account.id] = account
        return account

    async def update_fields(
        self, account_id: AccountId, **fields: Any
    ) -> Optional[UserAccount]:
        """Merge non-None fields into the stored account."""
        account = self._accounts.get(account_id)
        if not account:
            return None
        clean = {name: value for name, value in fields.items() if value is not None}
        updated = account.model_copy(update=clean)
        self._accounts[account_id] = updated
        return updated

    async def clear_fields(
        self, account_id: AccountId, *names: str
    ) -> Optional[UserAccount]:
        """Reset the named fields to None."""
        account = self._accounts.get(account_id)
        if not account:
            return None
        updated = account.model_copy(update={name: None for name in names})
        self._accounts[account_id] = updated
        return updated
