"""Letter repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from penpal.domain.model.letter import Letter
from penpal.domain.value import AccountId, ContactId, LetterId


class LetterRepository(ABC):
    """Repository for Letter entities."""

    @abstractmethod
    async def find_by_id(self, letter_id: LetterId) -> Optional[Letter]:
        """Find a letter by ID."""
        pass

    @abstractmethod
    async def save(self, letter: Letter) -> Letter:
        """Save a letter (create or update)."""
        pass

    @abstractmethod
    async def find_sent(self, sender_id: AccountId) -> list[Letter]:
        """Get letters sent by an account, newest first."""
        pass

    @abstractmethod
    async def find_received(self, recipient_id: ContactId) -> list[Letter]:
        """Get letters addressed to a recipient id, newest first."""
        pass
