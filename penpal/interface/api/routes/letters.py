"""Letter routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from penpal.application.usecase.letter import (
    CreateLetterRequest,
    CreateLetterResponse,
    CreateLetterUseCase,
    GetLetterRequest,
    GetLetterResponse,
    GetLetterUseCase,
    ListLettersRequest,
    ListLettersResponse,
    ListReceivedLettersUseCase,
    ListSentLettersUseCase,
)
from penpal.domain.error import DomainError
from penpal.domain.service import JWTService
from penpal.interface.api.routes.common import require_account_id
from penpal.interface.error import error_response

router = APIRouter(prefix="/letters", tags=["letters"], route_class=DishkaRoute)


class CreateLetterAPIRequest(BaseModel):
    """API request for sending a letter.

    The file is uploaded to the object store by the client beforehand.
    """

    recipient_id: str = Field(min_length=1)
    description: str = Field(min_length=1, max_length=2000)
    image_url: str = Field(min_length=1)
    file_type: str | None = None
    file_name: str | None = None
    thumbnail_url: str | None = None


@router.post(
    "", response_model=CreateLetterResponse, status_code=status.HTTP_201_CREATED
)
async def create_letter(
    request: CreateLetterAPIRequest,
    create_letter_use_case: FromDishka[CreateLetterUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
):
    """Send a letter to one of the caller's contacts."""
    account_id = require_account_id(jwt_service, auth_token)
    try:
        return await create_letter_use_case.execute(
            CreateLetterRequest(sender_id=account_id, **request.model_dump())
        )
    except DomainError as e:
        return error_response(e)


@router.get("/sent", response_model=ListLettersResponse)
async def list_sent_letters(
    list_sent_letters_use_case: FromDishka[ListSentLettersUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
):
    """List letters the caller sent, newest first."""
    account_id = require_account_id(jwt_service, auth_token)
    try:
        return await list_sent_letters_use_case.execute(
            ListLettersRequest(account_id=account_id)
        )
    except DomainError as e:
        return error_response(e)


@router.get("/received", response_model=ListLettersResponse)
async def list_received_letters(
    list_received_letters_use_case: FromDishka[ListReceivedLettersUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
):
    """List letters addressed to the caller's MeWe user, newest first."""
    account_id = require_account_id(jwt_service, auth_token)
    try:
        return await list_received_letters_use_case.execute(
            ListLettersRequest(account_id=account_id)
        )
    except DomainError as e:
        return error_response(e)


@router.get("/{letter_id}", response_model=GetLetterResponse)
async def get_letter(
    letter_id: UUID,
    get_letter_use_case: FromDishka[GetLetterUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
):
    """Get a letter the caller sent or received."""
    account_id = require_account_id(jwt_service, auth_token)
    try:
        return await get_letter_use_case.execute(
            GetLetterRequest(account_id=account_id, letter_id=str(letter_id))
        )
    except DomainError as e:
        return error_response(e)
