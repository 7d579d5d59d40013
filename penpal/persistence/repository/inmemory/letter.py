"""In-memory letter repository for testing."""

from typing import Optional

from penpal.domain.model.letter import Letter
from penpal.domain.repository.letter import LetterRepository
from penpal.domain.value import AccountId, ContactId, LetterId


class InMemoryLetterRepository(LetterRepository):
    """In-memory implementation of LetterRepository for testing."""

    def __init__(self) -> None:
        self._letters: dict[LetterId, Letter] = {}

    async def find_by_id(self, letter_id: LetterId) -> Optional[Letter]:
        """Find a letter by ID."""
        return self._letters.get(letter_id)

    async def save(self, letter: Letter) -> Letter:
        """Save or update a letter."""
        self._letters[letter.id] = letter
        return letter

    async def find_sent(self, sender_id: AccountId) -> list[Letter]:
        """Get letters sent by an account, newest first."""
        letters = [
            letter for letter in self._letters.values() if letter.sender_id == sender_id
        ]
        letters.sort(key=lambda letter: letter.created_at, reverse=True)
        return letters

    async def find_received(self, recipient_id: ContactId) -> list[Letter]:
        """Get letters addressed to a recipient, newest first."""
        letters = [
            letter
            for letter in self._letters.values()
            if letter.recipient_id == recipient_id
        ]
        letters.sort(key=lambda letter: letter.created_at, reverse=True)
        return letters
