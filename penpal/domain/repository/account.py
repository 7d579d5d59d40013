"""User account repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from penpal.domain.model.account import UserAccount
from penpal.domain.value import AccountId


class UserAccountRepository(ABC):
    """Repository for the UserAccount aggregate.

    Behaves like a document store keyed by account id: partial updates
    merge into the stored record and leave unspecified fields untouched.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[UserAccount]:
        """Find an account by ID.

        Args:
            account_id: The account's identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, account: UserAccount) -> UserAccount:
        """Save an account (create or replace).

        Args:
            account: The account to save

        Returns:
            The saved account
        """
        pass

    @abstractmethod
    async def update_fields(
        self, account_id: AccountId, **fields: Any
    ) -> Optional[UserAccount]:
        """Merge the given fields into the stored account.

        Fields whose value is None are dropped before the write, so passing
        None never erases a stored value. Use ``clear_fields`` for that.

        Args:
            account_id: The account to update
            **fields: Field values to write (last write wins)

        Returns:
            The updated account, or None if it does not exist
        """
        pass

    @abstractmethod
    async def clear_fields(
        self, account_id: AccountId, *names: str
    ) -> Optional[UserAccount]:
        """Explicitly reset the named optional fields to None.

        Args:
            account_id: The account to update
            *names: Field names to clear

        Returns:
            The updated account, or None if it does not exist
        """
        pass
