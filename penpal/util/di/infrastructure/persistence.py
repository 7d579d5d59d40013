"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from penpal.config import Settings
from penpal.domain.repository import (
    ContactRepository,
    LetterRepository,
    UserAccountRepository,
)
from penpal.persistence.database import create_engine, create_session_factory
from penpal.persistence.repository import (
    PostgresContactRepository,
    PostgresLetterRepository,
    PostgresUserAccountRepository,
)
from penpal.util.di.base import ProviderBase
from penpal.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Committed when the request finishes normally, rolled back if the
        handler raised. Routes return error responses for expected failures,
        so writes made before a remote error are kept.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, session: AsyncSession) -> UserAccountRepository:
        """Provide UserAccount repository."""
        return PostgresUserAccountRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_contact_repository(self, session: AsyncSession) -> ContactRepository:
        """Provide Contact repository."""
        return PostgresContactRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_letter_repository(self, session: AsyncSession) -> LetterRepository:
        """Provide Letter repository."""
        return PostgresLetterRepository(session)
