"""Domain model entities for Penpal."""

from penpal.domain.model.account import UserAccount
from penpal.domain.model.contact import Contact
from penpal.domain.model.letter import Letter

__all__ = [
    "UserAccount",
    "Contact",
    "Letter",
]
