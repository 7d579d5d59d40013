"""Get letter use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from penpal.domain.error import NotFoundError
from penpal.domain.model import Letter
from penpal.domain.service import AccountService, LetterService
from penpal.domain.value import AccountId, LetterId


class LetterInfo(BaseModel):
    """Letter in responses."""

    letter_id: str
    sender_id: str
    recipient_id: str
    description: str
    image_url: str
    file_type: str | None
    file_name: str | None
    thumbnail_url: str | None
    created_at: datetime

    @classmethod
    def from_letter(cls, letter: Letter) -> "LetterInfo":
        return cls(
            letter_id=str(letter.id),
            sender_id=letter.sender_id,
            recipient_id=letter.recipient_id,
            description=letter.description,
            image_url=letter.image_url,
            file_type=letter.file_type,
            file_name=letter.file_name,
            thumbnail_url=letter.thumbnail_url,
            created_at=letter.created_at,
        )


class GetLetterRequest(BaseModel):
    """Get letter request."""

    account_id: str
    letter_id: str


class GetLetterResponse(BaseModel):
    """Get letter response."""

    letter: LetterInfo


class GetLetterUseCase:
    """Use case for reading a single letter."""

    def __init__(
        self, account_service: AccountService, letter_service: LetterService
    ) -> None:
        """Initialize get letter use case.

        Args:
            account_service: Account domain service
            letter_service: Letter domain service
        """
        self.account_service = account_service
        self.letter_service = letter_service

    async def execute(self, request: GetLetterRequest) -> GetLetterResponse:
        """Load a letter visible to the account.

        Only the sender and the addressee (matched on the account's MeWe
        user id) can read a letter; anyone else gets a not-found.

        Raises:
            NotFoundError: If the letter does not exist or is not visible
        """
        account = await self.account_service.get_by_id(AccountId(request.account_id))
        letter = await self.letter_service.get_letter(LetterId(UUID(request.letter_id)))

        is_sender = letter.sender_id == account.id
        is_recipient = bool(
            account.remote_user_id and letter.recipient_id == account.remote_user_id
        )
        if not (is_sender or is_recipient):
            raise NotFoundError("Letter", request.letter_id)

        return GetLetterResponse(letter=LetterInfo.from_letter(letter))
