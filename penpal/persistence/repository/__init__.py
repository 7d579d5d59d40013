"""PostgreSQL repository implementations."""

from penpal.persistence.repository.account import PostgresUserAccountRepository
from penpal.persistence.repository.contact import PostgresContactRepository
from penpal.persistence.repository.letter import PostgresLetterRepository

__all__ = [
    "PostgresUserAccountRepository",
    "PostgresContactRepository",
    "PostgresLetterRepository",
]
