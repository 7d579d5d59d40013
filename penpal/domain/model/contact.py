"""Contact entity.

Contacts are owned by a user account. Synced contacts use the MeWe user id
as their id so a resync overwrites rather than duplicates them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from penpal.domain.model.account import utcnow
from penpal.domain.model.common import DomainModel
from penpal.domain.value import AccountId, ContactId


class Contact(DomainModel):
    """Profile snapshot of someone the owner can write to."""

    id: ContactId
    owner_id: AccountId
    display_name: str
    handle: Optional[str] = None
    photo_url: Optional[str] = None
    updated_at: datetime = Field(default_factory=utcnow)
