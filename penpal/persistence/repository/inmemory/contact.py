"""In-memory contact repository for testing."""

from typing import Optional

from penpal.domain.model.contact import Contact
from penpal.domain.repository.contact import ContactRepository
from penpal.domain.value import AccountId, ContactId


class InMemoryContactRepository(ContactRepository):
    """In-memory implementation of ContactRepository for testing."""

    def __init__(self) -> None:
        self._contacts: dict[tuple[AccountId, ContactId], Contact] = {}

    async def find_all_by_owner(self, owner_id: AccountId) -> list[Contact]:
        """Get all contacts of an owner."""
        return [c for c in self._contacts.values() if c.owner_id == owner_id]

    async def find_by_id(
        self, owner_id: AccountId, contact_id: ContactId
    ) -> Optional[Contact]:
        """Find one of an owner's contacts."""
        return self._contacts.get((owner_id, contact_id))

    async def save(self, contact: Contact) -> Contact:
        """Upsert a contact."""
        self._contacts[(contact.owner_id, contact.id)] = contact
        return contact

    async def delete(self, owner_id: AccountId, contact_id: ContactId) -> None:
        """Delete a contact (no-op if absent)."""
        self._contacts.pop((owner_id, contact_id), None)
