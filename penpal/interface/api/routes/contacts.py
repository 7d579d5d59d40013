"""Contact routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from penpal.adapter.error import ProviderError
from penpal.application.usecase.contact import (
    ImportContactRequest,
    ImportContactResponse,
    ImportContactUseCase,
    ListContactsRequest,
    ListContactsResponse,
    ListContactsUseCase,
    SyncContactsRequest,
    SyncContactsResponse,
    SyncContactsUseCase,
)
from penpal.domain.error import DomainError
from penpal.domain.service import JWTService
from penpal.interface.api.routes.common import require_account_id
from penpal.interface.error import error_response

router = APIRouter(prefix="/contacts", tags=["contacts"], route_class=DishkaRoute)


class ImportContactAPIRequest(BaseModel):
    """API request for importing a contact by hand."""

    display_name: str = Field(min_length=1, max_length=200)
    handle: str | None = None
    photo_url: str | None = None


class SyncContactsAPIRequest(BaseModel):
    """API request for syncing contacts from MeWe."""

    search_term: str | None = None
    cursor: str | None = None
    page_size: int | None = Field(default=None, ge=1)
    max_results: int | None = Field(default=None, ge=1)
    after_id: str | None = None


@router.get("", response_model=ListContactsResponse)
async def list_contacts(
    list_contacts_use_case: FromDishka[ListContactsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
):
    """List stored contacts, ordered by display name."""
    account_id = require_account_id(jwt_service, auth_token)
    return await list_contacts_use_case.execute(
        ListContactsRequest(account_id=account_id)
    )


@router.post(
    "/import",
    response_model=ImportContactResponse,
    status_code=status.HTTP_201_CREATED,
)
async def import_contact(
    request: ImportContactAPIRequest,
    import_contact_use_case: FromDishka[ImportContactUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
):
    """Add a contact by hand. A later sync replaces it."""
    account_id = require_account_id(jwt_service, auth_token)
    try:
        return await import_contact_use_case.execute(
            ImportContactRequest(
                account_id=account_id,
                display_name=request.display_name,
                handle=request.handle,
                photo_url=request.photo_url,
            )
        )
    except DomainError as e:
        return error_response(e)


@router.post("/sync", response_model=SyncContactsResponse)
async def sync_contacts(
    sync_contacts_use_case: FromDishka[SyncContactsUseCase],
    jwt_service: FromDishka[JWTService],
    request: SyncContactsAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
):
    """Load or refresh contacts from MeWe.

    Exchanges the login-request token first when no usable bearer token is
    on file. Answers ``"status": "pending"`` while verification is pending.
    """
    account_id = require_account_id(jwt_service, auth_token)
    options = request or SyncContactsAPIRequest()
    try:
        return await sync_contacts_use_case.execute(
            SyncContactsRequest(account_id=account_id, **options.model_dump())
        )
    except (DomainError, ProviderError) as e:
        return error_response(e)
