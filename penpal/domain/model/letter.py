"""Letter entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from penpal.domain.model.account import utcnow
from penpal.domain.model.common import DomainModel
from penpal.domain.value import AccountId, ContactId, LetterId


class Letter(DomainModel):
    """An uploaded image or PDF addressed to one of the sender's contacts.

    The file itself lives in the external object store; only its URL is
    recorded here.
    """

    id: LetterId
    sender_id: AccountId
    recipient_id: ContactId  # MeWe user id of the addressee
    description: str = Field(min_length=1, max_length=2000)
    image_url: str
    file_type: Optional[str] = None
    file_name: Optional[str] = None
    thumbnail_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
