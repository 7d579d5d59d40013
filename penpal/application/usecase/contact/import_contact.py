"""Import contact use case."""

from pydantic import BaseModel, Field

from penpal.application.usecase.contact.list_contacts import ContactInfo
from penpal.domain.service import AccountService, ContactSyncService
from penpal.domain.value import AccountId


class ImportContactRequest(BaseModel):
    """Import contact request."""

    account_id: str
    display_name: str = Field(min_length=1, max_length=200)
    handle: str | None = None
    photo_url: str | None = None


class ImportContactResponse(BaseModel):
    """Import contact response."""

    contact: ContactInfo


class ImportContactUseCase:
    """Use case for adding a contact by hand."""

    def __init__(
        self,
        account_service: AccountService,
        contact_sync_service: ContactSyncService,
    ) -> None:
        """Initialize import contact use case.

        Args:
            account_service: Account domain service
            contact_sync_service: Contact domain service
        """
        self.account_service = account_service
        self.contact_sync_service = contact_sync_service

    async def execute(self, request: ImportContactRequest) -> ImportContactResponse:
        """Store a manually entered contact.

        Raises:
            NotFoundError: If the account does not exist
        """
        account = await self.account_service.get_by_id(AccountId(request.account_id))
        contact = await self.contact_sync_service.import_contact(
            account.id,
            display_name=request.display_name,
            handle=request.handle,
            photo_url=request.photo_url,
        )
        return ImportContactResponse(contact=ContactInfo.from_contact(contact))
