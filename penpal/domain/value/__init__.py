"""Domain value objects for Penpal."""

from penpal.domain.value.identifiers import AccountId, ContactId, LetterId
from penpal.domain.value.types import (
    ContactPage,
    ContactQuery,
    Email,
    LinkState,
    RemoteContact,
    RemoteProfile,
    TokenGrant,
)

__all__ = [
    # Identifiers
    "AccountId",
    "ContactId",
    "LetterId",
    # Types
    "ContactPage",
    "ContactQuery",
    "Email",
    "LinkState",
    "RemoteContact",
    "RemoteProfile",
    "TokenGrant",
]
