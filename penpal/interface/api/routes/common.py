"""Helpers shared by the authenticated routes."""

from fastapi import HTTPException, status

from penpal.domain.service import JWTService


def require_account_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Resolve the caller's account ID from the identity cookie.

    Raises:
        HTTPException: 401 if the cookie is missing or the token is invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
        )

    account_id = jwt_service.get_account_id_from_token(auth_token)
    if not account_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )
    return account_id
