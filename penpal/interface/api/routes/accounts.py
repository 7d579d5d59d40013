"""Account routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from penpal.application.usecase.account import (
    GetAccountRequest,
    GetAccountResponse,
    GetAccountUseCase,
)
from penpal.domain.error import DomainError
from penpal.domain.service import JWTService
from penpal.interface.api.routes.common import require_account_id
from penpal.interface.error import error_response

router = APIRouter(prefix="/accounts", tags=["accounts"], route_class=DishkaRoute)


@router.get("/me", response_model=GetAccountResponse)
async def get_my_account(
    get_account_use_case: FromDishka[GetAccountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
):
    """Get the signed-in account and its MeWe link state."""
    account_id = require_account_id(jwt_service, auth_token)
    try:
        return await get_account_use_case.execute(
            GetAccountRequest(account_id=account_id)
        )
    except DomainError as e:
        return error_response(e)
