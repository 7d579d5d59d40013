"""In-memory repository implementations for testing."""

from .account import InMemoryUserAccountRepository
from .contact import InMemoryContactRepository
from .letter import InMemoryLetterRepository

__all__ = [
    "InMemoryContactRepository",
    "InMemoryLetterRepository",
    "InMemoryUserAccountRepository",
]
