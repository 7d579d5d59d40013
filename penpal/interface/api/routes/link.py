"""MeWe account link routes.

The handshake runs in three calls: request a login (MeWe emails the user),
exchange the login-request token once the user approved it, then connect
to pull the MeWe profile. Exchange and connect answer ``"status":
"pending"`` until the approval happened.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from penpal.adapter.error import ProviderError
from penpal.application.usecase.link import (
    ConnectAccountRequest,
    ConnectAccountResponse,
    ConnectAccountUseCase,
    ExchangeTokenRequest,
    ExchangeTokenResponse,
    ExchangeTokenUseCase,
    RequestLinkRequest,
    RequestLinkResponse,
    RequestLinkUseCase,
)
from penpal.domain.error import DomainError
from penpal.domain.service import JWTService
from penpal.interface.api.routes.common import require_account_id
from penpal.interface.error import error_response

router = APIRouter(prefix="/link", tags=["link"], route_class=DishkaRoute)


class RequestLinkAPIRequest(BaseModel):
    """API request for starting the MeWe link."""

    relink: bool = False


@router.post("/request", response_model=RequestLinkResponse)
async def request_link(
    request_link_use_case: FromDishka[RequestLinkUseCase],
    jwt_service: FromDishka[JWTService],
    request: RequestLinkAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
):
    """Request a MeWe login for the account's email.

    An existing login-request token is kept unless ``relink`` is true.
    """
    account_id = require_account_id(jwt_service, auth_token)
    relink = request.relink if request else False
    try:
        return await request_link_use_case.execute(
            RequestLinkRequest(account_id=account_id, relink=relink)
        )
    except (DomainError, ProviderError) as e:
        return error_response(e)


@router.post("/token", response_model=ExchangeTokenResponse)
async def exchange_token(
    exchange_token_use_case: FromDishka[ExchangeTokenUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
):
    """Exchange the login-request token for a MeWe bearer token."""
    account_id = require_account_id(jwt_service, auth_token)
    try:
        return await exchange_token_use_case.execute(
            ExchangeTokenRequest(account_id=account_id)
        )
    except (DomainError, ProviderError) as e:
        return error_response(e)


@router.post("/connect", response_model=ConnectAccountResponse)
async def connect_account(
    connect_account_use_case: FromDishka[ConnectAccountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
):
    """Fetch the MeWe profile and store it on the account."""
    account_id = require_account_id(jwt_service, auth_token)
    try:
        return await connect_account_use_case.execute(
            ConnectAccountRequest(account_id=account_id)
        )
    except (DomainError, ProviderError) as e:
        return error_response(e)
