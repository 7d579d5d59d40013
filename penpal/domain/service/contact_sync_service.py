"""Contact domain service."""

import asyncio
from datetime import datetime
from uuid import uuid4

import logfire

from penpal.domain.error import NotFoundError
from penpal.domain.model.account import utcnow
from penpal.domain.model.contact import Contact
from penpal.domain.repository.contact import ContactRepository
from penpal.domain.value import AccountId, ContactId, RemoteContact

from .base import Service


class ContactSyncService(Service):
    """Domain service for an account's contact list.

    The MeWe followed list is the source of truth for synced contacts: a
    sync replaces the owner's whole contact set with the fetched list.
    """

    def __init__(self, contact_repository: ContactRepository) -> None:
        """Initialize contact sync service.

        Args:
            contact_repository: Contact repository
        """
        self.contact_repository = contact_repository

    async def reconcile(
        self,
        owner_id: AccountId,
        remote_contacts: list[RemoteContact],
        now: datetime | None = None,
    ) -> list[Contact]:
        """Replace the owner's contacts with the remote list.

        All existing contacts are deleted first; the upserts only start once
        every delete has finished. The first failure propagates and nothing
        is rolled back.

        Args:
            owner_id: Account whose contacts are replaced
            remote_contacts: Freshly fetched contact list (may be empty)
            now: Timestamp written to every upserted contact

        Returns:
            Contacts as stored after the sync
        """
        now = now or utcnow()
        with logfire.span(
            "contact_sync_service.reconcile",
            owner_id=owner_id,
            remote_count=len(remote_contacts),
        ):
            existing = await self.contact_repository.find_all_by_owner(owner_id)
            await asyncio.gather(
                *(
                    self.contact_repository.delete(owner_id, contact.id)
                    for contact in existing
                )
            )
            logfire.info(
                "Existing contacts removed", owner_id=owner_id, count=len(existing)
            )

            stored = await asyncio.gather(
                *(
                    self.contact_repository.save(
                        Contact(
                            id=ContactId(remote.remote_id),
                            owner_id=owner_id,
                            display_name=remote.display_name,
                            handle=remote.handle,
                            photo_url=remote.photo_url,
                            updated_at=now,
                        )
                    )
                    for remote in remote_contacts
                )
            )
            logfire.info("Contacts synced", owner_id=owner_id, count=len(stored))
            return list(stored)

    async def list_contacts(self, owner_id: AccountId) -> list[Contact]:
        """Get the owner's contacts ordered by display name.

        Args:
            owner_id: Owning account

        Returns:
            List of contacts (may be empty)
        """
        with logfire.span("contact_sync_service.list_contacts", owner_id=owner_id):
            contacts = await self.contact_repository.find_all_by_owner(owner_id)
            logfire.info("Contacts retrieved", owner_id=owner_id, count=len(contacts))
            return sorted(contacts, key=lambda c: (c.display_name.casefold(), c.id))

    async def import_contact(
        self,
        owner_id: AccountId,
        display_name: str,
        handle: str | None = None,
        photo_url: str | None = None,
    ) -> Contact:
        """Add a contact by hand.

        Manually imported contacts get a fresh id, so they never collide
        with synced ones. A later sync still removes them.

        Args:
            owner_id: Owning account
            display_name: Name shown for the contact
            handle: Optional handle
            photo_url: Optional avatar URL

        Returns:
            Stored contact
        """
        with logfire.span("contact_sync_service.import_contact", owner_id=owner_id):
            contact = Contact(
                id=ContactId(uuid4().hex),
                owner_id=owner_id,
                display_name=display_name,
                handle=handle,
                photo_url=photo_url,
            )
            saved = await self.contact_repository.save(contact)
            logfire.info("Contact imported", owner_id=owner_id, contact_id=saved.id)
            return saved

    async def get_contact(self, owner_id: AccountId, contact_id: ContactId) -> Contact:
        """Get one of the owner's contacts.

        Raises:
            NotFoundError: If the owner has no such contact
        """
        contact = await self.contact_repository.find_by_id(owner_id, contact_id)
        if contact is None:
            logfire.warn("Contact not found", owner_id=owner_id, contact_id=contact_id)
            raise NotFoundError("Contact", contact_id)
        return contact
