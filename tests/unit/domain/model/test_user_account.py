"""Unit tests for the UserAccount link state."""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from penpal.domain.model import UserAccount
from penpal.domain.value import AccountId, LinkState, RemoteProfile, TokenGrant
from tests.factories import NOW, make_account


class TestLinkState:
    """Tests for the derived link state."""

    def test_fresh_account_is_unlinked(self):
        assert make_account().link_state(NOW) == LinkState.UNLINKED

    def test_login_request_token_only_is_link_requested(self):
        account = make_account(login_request_token="lrt")
        assert account.link_state(NOW) == LinkState.LINK_REQUESTED

    def test_pending_bearer_token_is_pending(self):
        account = make_account(
            login_request_token="lrt", bearer_token="bt", pending=True
        )
        assert account.link_state(NOW) == LinkState.PENDING

    def test_unexpired_bearer_token_is_active(self):
        account = make_account(login_request_token="lrt", bearer_token="bt")
        assert account.link_state(NOW) == LinkState.ACTIVE

    def test_token_is_expired_at_exact_expiry(self):
        account = make_account(login_request_token="lrt", bearer_token="bt")
        assert account.link_state(NOW + timedelta(hours=1)) == LinkState.EXPIRED

    def test_bearer_token_without_expiry_is_rejected(self):
        with pytest.raises(ValidationError):
            UserAccount(
                id=AccountId("acct-1"),
                login_request_token="lrt",
                bearer_token="bt",
            )


    def test_naive_expiry_is_taken_as_utc(self):
        account = UserAccount(
            id=AccountId("acct-1"),
            login_request_token="lrt",
            bearer_token="bt",
            bearer_token_expires_at=datetime(2026, 3, 1, 13, 0),
        )

        assert account.bearer_token_expires_at == NOW + timedelta(hours=1)
        assert account.link_state(NOW) == LinkState.ACTIVE


class TestTransitions:
    """Tests for the copy-on-write transitions."""

    def test_token_grant_defaults_expiry_to_ttl(self):
        account = make_account(login_request_token="lrt")

        updated = account.with_token_grant(
            TokenGrant(token="bt"), NOW, timedelta(hours=24)
        )

        assert updated.bearer_token == "bt"
        assert updated.bearer_token_expires_at == NOW + timedelta(hours=24)
        assert account.bearer_token is None  # original untouched

    def test_naive_grant_expiry_is_taken_as_utc(self):
        account = make_account(login_request_token="lrt")
        grant = TokenGrant(token="bt", expires_at=datetime(2026, 3, 1, 14, 0))

        updated = account.with_token_grant(grant, NOW, timedelta(hours=24))

        assert updated.bearer_token_expires_at == NOW + timedelta(hours=2)
        assert updated.link_state(NOW) == LinkState.ACTIVE

    def test_token_grant_keeps_remote_expiry(self):
        expires_at = NOW + timedelta(minutes=5)
        account = make_account(login_request_token="lrt")

        updated = account.with_token_grant(
            TokenGrant(token="bt", expires_at=expires_at), NOW, timedelta(hours=24)
        )

        assert updated.bearer_token_expires_at == expires_at

    def test_new_login_request_token_drops_bearer_token(self):
        account = make_account(login_request_token="old", bearer_token="bt")

        updated = account.with_login_request_token("new", NOW)

        assert updated.login_request_token == "new"
        assert updated.bearer_token is None
        assert updated.bearer_token_expires_at is None
        assert updated.link_state(NOW) == LinkState.LINK_REQUESTED

    def test_with_profile_copies_profile_fields(self):
        account = make_account(login_request_token="lrt", bearer_token="bt")

        updated = account.with_profile(
            RemoteProfile(remote_user_id="u1", display_name="Ada", photo_url=None),
            NOW,
        )

        assert updated.remote_user_id == "u1"
        assert updated.display_name == "Ada"
        assert updated.updated_at == NOW
