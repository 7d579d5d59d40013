"""Sign-in routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel, Field

from penpal.adapter.error import ProviderError
from penpal.application.usecase.account import (
    SignInRequest,
    SignInResponse,
    SignInUseCase,
)
from penpal.config import Settings
from penpal.domain.error import DomainError
from penpal.interface.error import error_response
from penpal.util.jwt import JWTError
from penpal.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class SessionAPIRequest(BaseModel):
    """API request for opening a session."""

    id_token: str = Field(min_length=1)  # Issued by the identity service


@router.post("/session", response_model=SignInResponse)
async def create_session(
    request: SessionAPIRequest,
    response: Response,
    sign_in_use_case: FromDishka[SignInUseCase],
    settings: FromDishka[Settings],
):
    """Sign in with an identity token and set the session cookie.

    The first sign-in creates the account and, when it has an email,
    requests the MeWe link straight away.

    Raises:
        HTTPException: 401 if the identity token is invalid
    """
    try:
        result = await sign_in_use_case.execute(SignInRequest(token=request.id_token))
    except JWTError as e:
        logger.info("Rejected identity token: %s", e)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except (DomainError, ProviderError) as e:
        failure = error_response(e)
        _set_session_cookie(failure, request.id_token, settings)
        return failure

    _set_session_cookie(response, request.id_token, settings)
    return result


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(settings: FromDishka[Settings]) -> Response:
    """Clear the session cookie."""
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return response


def _set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    is_production = settings.environment == "production"
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )
