"""List contacts use case."""

from datetime import datetime

from pydantic import BaseModel

from penpal.domain.model import Contact
from penpal.domain.service import ContactSyncService
from penpal.domain.value import AccountId


class ContactInfo(BaseModel):
    """Contact in responses."""

    contact_id: str
    display_name: str
    handle: str | None
    photo_url: str | None
    updated_at: datetime

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactInfo":
        return cls(
            contact_id=contact.id,
            display_name=contact.display_name,
            handle=contact.handle,
            photo_url=contact.photo_url,
            updated_at=contact.updated_at,
        )


class ListContactsRequest(BaseModel):
    """List contacts request."""

    account_id: str


class ListContactsResponse(BaseModel):
    """List contacts response."""

    contacts: list[ContactInfo]


class ListContactsUseCase:
    """Use case for listing the stored contacts without contacting MeWe."""

    def __init__(self, contact_sync_service: ContactSyncService) -> None:
        """Initialize list contacts use case.

        Args:
            contact_sync_service: Contact domain service
        """
        self.contact_sync_service = contact_sync_service

    async def execute(self, request: ListContactsRequest) -> ListContactsResponse:
        contacts = await self.contact_sync_service.list_contacts(
            AccountId(request.account_id)
        )
        return ListContactsResponse(
            contacts=[ContactInfo.from_contact(c) for c in contacts]
        )
