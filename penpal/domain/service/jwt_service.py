"""Identity token domain service."""

import logfire

from penpal.config import AuthSettings
from penpal.util.jwt import TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for identity token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify an identity token and extract its payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("Identity token verified", account_id=payload.account_id)
                return payload
            except Exception as e:
                logfire.error("Identity token verification failed", error=str(e))
                raise

    def get_account_id_from_token(self, token: str | None) -> str | None:
        """Extract the account ID from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Account ID if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token).account_id
        except Exception as e:
            logfire.debug(
                "Identity token rejected, treating as unauthenticated", error=str(e)
            )
            return None
