"""UserAccount repository implementation using PostgreSQL."""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from penpal.domain.model.account import UserAccount, utcnow
from penpal.domain.repository.account import UserAccountRepository
from penpal.domain.value import AccountId
from penpal.persistence.mappers import row_to_user_account, user_account_to_dict
from penpal.persistence.tables import user_accounts_table


class PostgresUserAccountRepository(UserAccountRepository):
    """PostgreSQL implementation of UserAccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[UserAccount]:
        """Get account by ID.

        Args:
            account_id: Account ID to look up

        Returns:
            UserAccount if found, None otherwise
        """
        stmt = select(user_accounts_table).where(user_accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_user_account(dict(row))

    async def save(self, account: UserAccount) -> UserAccount:
        """Insert or fully replace an account.

        Args:
            account: UserAccount to save

        Returns:
            Saved UserAccount
        """
        values = user_account_to_dict(account)
        stmt = insert(user_accounts_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[user_accounts_table.c.id],
            set_={k: v for k, v in values.items() if k not in ("id", "created_at")},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return account

    async def update_fields(
        self, account_id: AccountId, **fields: Any
    ) -> Optional[UserAccount]:
        """Merge non-None fields into the stored account.

        Args:
            account_id: Account to update
            **fields: Column values to write

        Returns:
            Updated UserAccount, or None if not found
        """
        clean = {name: value for name, value in fields.items() if value is not None}
        clean.setdefault("updated_at", utcnow())
        return await self._update(account_id, clean)

    async def clear_fields(
        self, account_id: AccountId, *names: str
    ) -> Optional[UserAccount]:
        """Reset the named columns to NULL.

        Args:
            account_id: Account to update
            *names: Column names to clear

        Returns:
            Updated UserAccount, or None if not found
        """
        values: dict[str, Any] = {name: None for name in names}
        values["updated_at"] = utcnow()
        return await self._update(account_id, values)

    async def _update(
        self, account_id: AccountId, values: dict[str, Any]
    ) -> Optional[UserAccount]:
        stmt = (
            user_accounts_table.update()
            .where(user_accounts_table.c.id == account_id)
            .values(**values)
            .returning(*user_accounts_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()

        if not row:
            return None

        return row_to_user_account(dict(row))
