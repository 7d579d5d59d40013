"""Contact repository implementation using PostgreSQL."""

import asyncio
from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from penpal.domain.model.contact import Contact
from penpal.domain.repository.contact import ContactRepository
from penpal.domain.value import AccountId, ContactId
from penpal.persistence.mappers import contact_to_dict, row_to_contact
from penpal.persistence.tables import contacts_table


class PostgresContactRepository(ContactRepository):
    """PostgreSQL implementation of ContactRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session
        # An AsyncSession cannot run statements concurrently; gathered
        # writes from the contact sync queue up here.
        self._lock = asyncio.Lock()

    async def find_all_by_owner(self, owner_id: AccountId) -> list[Contact]:
        """Get all contacts of an owner.

        Args:
            owner_id: Owning account

        Returns:
            List of contacts (may be empty)
        """
        stmt = select(contacts_table).where(contacts_table.c.owner_id == owner_id)
        async with self._lock:
            result = await self.session.execute(stmt)
        return [row_to_contact(dict(row)) for row in result.mappings().all()]

    async def find_by_id(
        self, owner_id: AccountId, contact_id: ContactId
    ) -> Optional[Contact]:
        """Find one of an owner's contacts."""
        stmt = select(contacts_table).where(
            contacts_table.c.owner_id == owner_id,
            contacts_table.c.id == contact_id,
        )
        async with self._lock:
            result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_contact(dict(row))

    async def save(self, contact: Contact) -> Contact:
        """Upsert a contact keyed by (owner_id, id)."""
        values = contact_to_dict(contact)
        stmt = insert(contacts_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            constraint="pk_contacts",
            set_={k: v for k, v in values.items() if k not in ("id", "owner_id")},
        )
        async with self._lock:
            await self.session.execute(stmt)
            await self.session.flush()
        return contact

    async def delete(self, owner_id: AccountId, contact_id: ContactId) -> None:
        """Delete a contact."""
        stmt = contacts_table.delete().where(
            contacts_table.c.owner_id == owner_id,
            contacts_table.c.id == contact_id,
        )
        async with self._lock:
            await self.session.execute(stmt)
            await self.session.flush()
