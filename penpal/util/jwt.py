"""Identity token utilities.

Identity tokens are issued by the external identity service and signed with
the shared secret from ``AuthSettings``. ``create_token`` mirrors what the
identity service issues and is used by tests and local tooling.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, Field, ValidationError

from penpal.config import AuthSettings


class TokenPayload(BaseModel):
    """Identity token payload."""

    account_id: str = Field(alias="sub", min_length=1)
    email: str | None = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    account_id: str, email: str | None, settings: AuthSettings
) -> str:
    """Create an identity token.

    Args:
        account_id: Account ID (``sub`` claim)
        email: Optional email claim
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload: dict = {"sub": account_id, "exp": expiry}
    if email:
        payload["email"] = email

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an identity token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValidationError):
        raise JWTError("Invalid token")
