"""User account aggregate root.

Created on first sign-in and mutated by every step of the MeWe linking
flow. The link state is never stored; it is derived from the token fields.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import Field, field_validator, model_validator

from penpal.domain.model.common import DomainModel
from penpal.domain.value import AccountId, LinkState, RemoteProfile, TokenGrant


def utcnow() -> datetime:
    """Timezone-aware current time."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware values pass through."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class UserAccount(DomainModel):
    """User account with its MeWe link credentials and profile snapshot."""

    id: AccountId
    email: Optional[str] = None  # Required for MeWe linking

    # MeWe handshake
    login_request_token: Optional[str] = None
    bearer_token: Optional[str] = None
    bearer_token_expires_at: Optional[datetime] = None
    bearer_token_pending: bool = False

    # Filled in by the connect step
    remote_user_id: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("bearer_token_expires_at")
    @classmethod
    def expiry_is_aware(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Naive expiries are taken to be UTC."""
        return as_utc(v) if v is not None else None

    @model_validator(mode="after")
    def bearer_token_has_expiry(self) -> "UserAccount":
        """A bearer token is never held without its expiry."""
        if self.bearer_token and self.bearer_token_expires_at is None:
            raise ValueError("bearer_token requires bearer_token_expires_at")
        return self

    def link_state(self, now: datetime | None = None) -> LinkState:
        """Compute the link state from the persisted token fields.

        Args:
            now: Reference time for the expiry check (defaults to now, UTC)

        Returns:
            Current link state
        """
        if not self.login_request_token:
            return LinkState.UNLINKED
        if not self.bearer_token:
            return LinkState.LINK_REQUESTED
        if self.bearer_token_pending:
            return LinkState.PENDING
        now = now or utcnow()
        if self.bearer_token_expires_at and now >= self.bearer_token_expires_at:
            return LinkState.EXPIRED
        return LinkState.ACTIVE

    def with_login_request_token(self, token: str, now: datetime) -> "UserAccount":
        """Return a copy holding a new login-request token.

        Any bearer token derived from a previous login-request token is
        dropped along with it.
        """
        return self.model_copy(
            update={
                "login_request_token": token,
                "bearer_token": None,
                "bearer_token_expires_at": None,
                "bearer_token_pending": False,
                "updated_at": now,
            }
        )

    def with_token_grant(
        self, grant: TokenGrant, now: datetime, default_ttl: timedelta
    ) -> "UserAccount":
        """Return a copy holding the bearer token from ``grant``.

        The expiry defaults to ``now + default_ttl`` when the remote side
        omits it.
        """
        return self.model_copy(
            update={
                "bearer_token": grant.token,
                "bearer_token_expires_at": as_utc(grant.expires_at or now + default_ttl),
                "bearer_token_pending": grant.pending,
                "updated_at": now,
            }
        )

    def without_bearer_token(self, now: datetime) -> "UserAccount":
        """Return a copy with the bearer token forgotten."""
        return self.model_copy(
            update={
                "bearer_token": None,
                "bearer_token_expires_at": None,
                "bearer_token_pending": False,
                "updated_at": now,
            }
        )

    def with_profile(self, profile: RemoteProfile, now: datetime) -> "UserAccount":
        """Return a copy holding the MeWe profile snapshot."""
        return self.model_copy(
            update={
                "remote_user_id": profile.remote_user_id,
                "display_name": profile.display_name,
                "photo_url": profile.photo_url,
                "updated_at": now,
            }
        )
