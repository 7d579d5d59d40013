"""Letter domain service."""

from uuid import uuid4

import logfire

from penpal.domain.error import NotFoundError
from penpal.domain.model.letter import Letter
from penpal.domain.repository.letter import LetterRepository
from penpal.domain.value import AccountId, ContactId, LetterId

from .base import Service


class LetterService(Service):
    """Domain service for letter operations."""

    def __init__(self, letter_repository: LetterRepository) -> None:
        """Initialize letter service.

        Args:
            letter_repository: Letter repository
        """
        self.letter_repository = letter_repository

    async def create_letter(
        self,
        sender_id: AccountId,
        recipient_id: ContactId,
        description: str,
        image_url: str,
        file_type: str | None = None,
        file_name: str | None = None,
        thumbnail_url: str | None = None,
    ) -> Letter:
        """Record a new letter.

        Args:
            sender_id: Sending account
            recipient_id: Contact id of the addressee
            description: Text accompanying the file
            image_url: Object store URL of the uploaded file
            file_type: MIME type of the file
            file_name: Original file name
            thumbnail_url: Object store URL of a preview image

        Returns:
            Created letter
        """
        with logfire.span(
            "letter_service.create_letter",
            sender_id=sender_id,
            recipient_id=recipient_id,
        ):
            letter = Letter(
                id=LetterId(uuid4()),
                sender_id=sender_id,
                recipient_id=recipient_id,
                description=description,
                image_url=image_url,
                file_type=file_type,
                file_name=file_name,
                thumbnail_url=thumbnail_url,
            )
            saved = await self.letter_repository.save(letter)
            logfire.info(
                "Letter created",
                letter_id=str(saved.id),
                sender_id=sender_id,
                file_type=file_type,
            )
            return saved

    async def get_letter(self, letter_id: LetterId) -> Letter:
        """Get letter by ID.

        Raises:
            NotFoundError: If letter not found
        """
        with logfire.span("letter_service.get_letter", letter_id=str(letter_id)):
            letter = await self.letter_repository.find_by_id(letter_id)
            if not letter:
                logfire.warn("Letter not found", letter_id=str(letter_id))
                raise NotFoundError("Letter", str(letter_id))
            return letter

    async def list_sent(self, sender_id: AccountId) -> list[Letter]:
        """Get letters sent by an account, newest first."""
        letters = await self.letter_repository.find_sent(sender_id)
        logfire.info("Sent letters retrieved", sender_id=sender_id, count=len(letters))
        return letters

    async def list_received(self, recipient_id: ContactId) -> list[Letter]:
        """Get letters addressed to a MeWe user id, newest first."""
        letters = await self.letter_repository.find_received(recipient_id)
        logfire.info(
            "Received letters retrieved",
            recipient_id=recipient_id,
            count=len(letters),
        )
        return letters
