"""MeWe developer API payloads.

Pydantic models for the JSON bodies returned by the MeWe endpoints, with
camelCase aliases matching the wire format.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from penpal.domain.model.account import as_utc
from penpal.domain.value import ContactPage, RemoteContact, RemoteProfile, TokenGrant


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ProfilePhoto(_WireModel):
    """Photo URLs in several sizes; only ``small`` is used."""

    small: str | None = None


class SigninResponse(_WireModel):
    """Body of POST /signin."""

    login_request_token: str = Field(alias="loginRequestToken", min_length=1)


class TokenResponse(_WireModel):
    """Body of GET /token."""

    pending: bool = False
    expires_at: datetime | None = Field(default=None, alias="expiresAt")
    token: str | None = None

    @field_validator("expires_at")
    @classmethod
    def expiry_in_utc(cls, v: datetime | None) -> datetime | None:
        """Read an expiry without an offset as UTC."""
        return as_utc(v) if v is not None else None

    @model_validator(mode="after")
    def token_unless_pending(self) -> "TokenResponse":
        """A settled exchange must carry a token."""
        if not self.pending and not self.token:
            raise ValueError("token is required when not pending")
        return self

    def to_grant(self) -> TokenGrant:
        return TokenGrant(
            token=self.token or None,
            expires_at=self.expires_at,
            pending=self.pending,
        )


class MeResponse(_WireModel):
    """Body of GET /me."""

    user_id: str = Field(alias="userId")
    name: str | None = None
    profile_photo: ProfilePhoto | None = Field(default=None, alias="profilePhoto")

    def to_profile(self) -> RemoteProfile:
        return RemoteProfile(
            remote_user_id=self.user_id,
            display_name=self.name,
            photo_url=self.profile_photo.small if self.profile_photo else None,
        )


class FollowedUser(_WireModel):
    """A followed MeWe user."""

    user_id: str = Field(alias="userId")
    name: str = ""
    handle: str | None = None
    profile_photo: ProfilePhoto | None = Field(default=None, alias="profilePhoto")


class FollowedEntry(_WireModel):
    user: FollowedUser


class FollowedResponse(_WireModel):
    """Body of GET /socialgraph/followed."""

    entries: list[FollowedEntry] = Field(default_factory=list, alias="list")
    next_page: str | None = Field(default=None, alias="nextPage")

    def to_page(self) -> ContactPage:
        return ContactPage(
            contacts=[
                RemoteContact(
                    remote_id=entry.user.user_id,
                    display_name=entry.user.name,
                    handle=entry.user.handle,
                    photo_url=(
                        entry.user.profile_photo.small
                        if entry.user.profile_photo
                        else None
                    ),
                )
                for entry in self.entries
            ],
            next_cursor=self.next_page,
        )
