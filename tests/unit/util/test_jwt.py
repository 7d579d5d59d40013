"""Tests for identity token handling."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from penpal.config import AuthSettings
from penpal.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="unit-test-secret")


def test_round_trip_keeps_claims():
    token = create_token("acct-1", "ada@example.com", SETTINGS)

    payload = verify_token(token, SETTINGS)

    assert payload.account_id == "acct-1"
    assert payload.email == "ada@example.com"


def test_email_claim_is_optional():
    payload = verify_token(create_token("acct-1", None, SETTINGS), SETTINGS)

    assert payload.email is None


def test_wrong_secret_is_rejected():
    token = create_token("acct-1", None, AuthSettings(jwt_secret="other-secret"))

    with pytest.raises(JWTError, match="Invalid token"):
        verify_token(token, SETTINGS)


def test_expired_token_is_rejected():
    token = jwt.encode(
        {"sub": "acct-1", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        SETTINGS.jwt_secret,
        algorithm=SETTINGS.jwt_algorithm,
    )

    with pytest.raises(JWTError, match="expired"):
        verify_token(token, SETTINGS)


def test_token_without_subject_is_rejected():
    token = jwt.encode(
        {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        SETTINGS.jwt_secret,
        algorithm=SETTINGS.jwt_algorithm,
    )

    with pytest.raises(JWTError):
        verify_token(token, SETTINGS)
