"""Create letter use case."""

import logfire
from pydantic import BaseModel, Field

from penpal.application.usecase.letter.get_letter import LetterInfo
from penpal.domain.service import AccountService, ContactSyncService, LetterService
from penpal.domain.value import AccountId, ContactId


class CreateLetterRequest(BaseModel):
    """Create letter request."""

    sender_id: str  # Account ID from the identity token
    recipient_id: str  # Contact ID of the addressee
    description: str = Field(min_length=1, max_length=2000)
    image_url: str  # Object store URL of the uploaded file
    file_type: str | None = None
    file_name: str | None = None
    thumbnail_url: str | None = None


class CreateLetterResponse(BaseModel):
    """Create letter response."""

    letter: LetterInfo


class CreateLetterUseCase:
    """Use case for sending a letter to one of the sender's contacts."""

    def __init__(
        self,
        account_service: AccountService,
        contact_sync_service: ContactSyncService,
        letter_service: LetterService,
    ) -> None:
        """Initialize create letter use case.

        Args:
            account_service: Account domain service
            contact_sync_service: Contact domain service
            letter_service: Letter domain service
        """
        self.account_service = account_service
        self.contact_sync_service = contact_sync_service
        self.letter_service = letter_service

    async def execute(self, request: CreateLetterRequest) -> CreateLetterResponse:
        """Execute create letter flow.

        Steps:
        1. Load the sender
        2. Check the recipient is one of the sender's contacts
        3. Record the letter

        Raises:
            NotFoundError: If the sender or the recipient contact is unknown
        """
        sender = await self.account_service.get_by_id(AccountId(request.sender_id))
        recipient = await self.contact_sync_service.get_contact(
            sender.id, ContactId(request.recipient_id)
        )

        with logfire.span(
            "create_letter.execute", sender_id=sender.id, recipient_id=recipient.id
        ):
            letter = await self.letter_service.create_letter(
                sender_id=sender.id,
                recipient_id=recipient.id,
                description=request.description,
                image_url=request.image_url,
                file_type=request.file_type,
                file_name=request.file_name,
                thumbnail_url=request.thumbnail_url,
            )
            return CreateLetterResponse(letter=LetterInfo.from_letter(letter))
