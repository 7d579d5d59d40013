"""Mock persistence providers for testing."""

from dishka import Scope, provide

from penpal.domain.repository import (
    ContactRepository,
    LetterRepository,
    UserAccountRepository,
)
from penpal.persistence.repository.inmemory import (
    InMemoryContactRepository,
    InMemoryLetterRepository,
    InMemoryUserAccountRepository,
)
from penpal.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories live as long as the container, so state survives across
    requests of one e2e test. Every test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_account_repository(self) -> UserAccountRepository:
        """Provide in-memory account repository."""
        return InMemoryUserAccountRepository()

    @provide(scope=Scope.APP)
    def get_contact_repository(self) -> ContactRepository:
        """Provide in-memory contact repository."""
        return InMemoryContactRepository()

    @provide(scope=Scope.APP)
    def get_letter_repository(self) -> LetterRepository:
        """Provide in-memory letter repository."""
        return InMemoryLetterRepository()
