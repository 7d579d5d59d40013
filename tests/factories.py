"""Builders for test data."""

from datetime import datetime, timedelta, timezone

from penpal.config import Settings
from penpal.domain.model import UserAccount
from penpal.domain.value import AccountId
from penpal.util.jwt import create_token

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

# Keeps a bearer token active for code paths that read the wall clock
FAR_FUTURE = timedelta(days=365 * 50)


def make_account(
    account_id: str = "acct-1",
    email: str | None = "ada@example.com",
    login_request_token: str | None = None,
    bearer_token: str | None = None,
    expires_in: timedelta | None = timedelta(hours=1),
    pending: bool = False,
    **fields,
) -> UserAccount:
    """Build an account in a given link state relative to ``NOW``."""
    return UserAccount(
        id=AccountId(account_id),
        email=email,
        login_request_token=login_request_token,
        bearer_token=bearer_token,
        bearer_token_expires_at=(
            NOW + expires_in if bearer_token and expires_in is not None else None
        ),
        bearer_token_pending=pending,
        **fields,
    )


def make_identity_token(account_id: str = "acct-1", email: str | None = None) -> str:
    """Issue an identity token the way the identity service would."""
    return create_token(account_id, email, Settings().auth)
