"""Contact repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from penpal.domain.model.contact import Contact
from penpal.domain.value import AccountId, ContactId


class ContactRepository(ABC):
    """Repository for Contact entities.

    Contacts are keyed by ``(owner_id, id)``, so saving a contact with an
    existing id for the same owner overwrites it.
    """

    @abstractmethod
    async def find_all_by_owner(self, owner_id: AccountId) -> list[Contact]:
        """Get all contacts of an owner.

        Args:
            owner_id: The owning account

        Returns:
            List of contacts (may be empty)
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, owner_id: AccountId, contact_id: ContactId
    ) -> Optional[Contact]:
        """Find one of an owner's contacts.

        Args:
            owner_id: The owning account
            contact_id: The contact's id

        Returns:
            The contact if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, contact: Contact) -> Contact:
        """Upsert a contact.

        Args:
            contact: The contact to save

        Returns:
            The saved contact
        """
        pass

    @abstractmethod
    async def delete(self, owner_id: AccountId, contact_id: ContactId) -> None:
        """Delete a contact.

        Args:
            owner_id: The owning account
            contact_id: The contact to delete
        """
        pass
