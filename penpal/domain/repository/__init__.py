"""Repository interfaces for Penpal domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from penpal.domain.repository.account import UserAccountRepository
from penpal.domain.repository.contact import ContactRepository
from penpal.domain.repository.letter import LetterRepository

__all__ = [
    "UserAccountRepository",
    "ContactRepository",
    "LetterRepository",
]
