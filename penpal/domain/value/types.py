"""Domain value objects for Penpal.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field, field_validator

from penpal.domain.value.common import RootValueObject, ValueObject


class LinkState(str, Enum):
    """Where an account stands in the MeWe linking handshake."""

    UNLINKED = "unlinked"
    LINK_REQUESTED = "link_requested"
    PENDING = "pending"
    ACTIVE = "active"
    EXPIRED = "expired"


class Email(RootValueObject[str]):
    """Email address used to request a MeWe login."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate the value is a non-empty, email-like string."""
        v = v.strip()
        if not v or "@" not in v or len(v) > 255:
            raise ValueError("Email must be a non-empty address of at most 255 characters")
        return v


class TokenGrant(ValueObject):
    """Result of exchanging a login-request token.

    ``token`` may be present while ``pending`` is true; it must not be
    treated as a usable bearer credential until a later exchange reports
    ``pending=False``.
    """

    token: str | None = None
    expires_at: datetime | None = None
    pending: bool = False


class RemoteProfile(ValueObject):
    """Profile of the linked MeWe user."""

    remote_user_id: str
    display_name: str | None = None
    photo_url: str | None = None


class RemoteContact(ValueObject):
    """One entry of the MeWe followed list."""

    remote_id: str
    display_name: str
    handle: str | None = None
    photo_url: str | None = None


class ContactQuery(ValueObject):
    """Optional filters and paging for a contact list fetch."""

    search_term: str | None = None
    cursor: str | None = None
    page_size: int | None = Field(default=None, ge=1)
    max_results: int | None = Field(default=None, ge=1)
    after_id: str | None = None


class ContactPage(ValueObject):
    """One page of the MeWe followed list."""

    contacts: list[RemoteContact] = []
    next_cursor: str | None = None
