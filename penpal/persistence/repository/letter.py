"""Letter repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from penpal.domain.model.letter import Letter
from penpal.domain.repository.letter import LetterRepository
from penpal.domain.value import AccountId, ContactId, LetterId
from penpal.persistence.mappers import letter_to_dict, row_to_letter
from penpal.persistence.tables import letters_table


class PostgresLetterRepository(LetterRepository):
    """PostgreSQL implementation of LetterRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, letter_id: LetterId) -> Optional[Letter]:
        """Get letter by ID."""
        stmt = select(letters_table).where(letters_table.c.id == letter_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_letter(dict(row))

    async def save(self, letter: Letter) -> Letter:
        """Save letter to database.

        Args:
            letter: Letter to save

        Returns:
            Saved Letter
        """
        letter_dict = letter_to_dict(letter)

        existing = await self.find_by_id(letter.id)

        if existing:
            stmt = (
                letters_table.update()
                .where(letters_table.c.id == letter.id)
                .values(**letter_dict)
            )
        else:
            stmt = letters_table.insert().values(**letter_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return letter

    async def find_sent(self, sender_id: AccountId) -> list[Letter]:
        """Get letters sent by an account, newest first."""
        stmt = (
            select(letters_table)
            .where(letters_table.c.sender_id == sender_id)
            .order_by(letters_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_letter(dict(row)) for row in result.mappings().all()]

    async def find_received(self, recipient_id: ContactId) -> list[Letter]:
        """Get letters addressed to a recipient, newest first."""
        stmt = (
            select(letters_table)
            .where(letters_table.c.recipient_id == recipient_id)
            .order_by(letters_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_letter(dict(row)) for row in result.mappings().all()]
