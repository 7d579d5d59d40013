"""Sync contacts use case."""

from typing import Literal

import logfire
from pydantic import BaseModel, Field

from penpal.adapter.error import RemoteRequestFailed
from penpal.application.usecase.contact.list_contacts import ContactInfo
from penpal.domain.service import (
    AccountLinkService,
    AccountService,
    ContactSyncService,
    RemoteAccountClient,
)
from penpal.domain.value import AccountId, ContactQuery


class SyncContactsRequest(BaseModel):
    """Sync contacts request.

    The query fields are passed through to MeWe; unset ones are not sent.
    """

    account_id: str
    search_term: str | None = None
    cursor: str | None = None
    page_size: int | None = Field(default=None, ge=1)
    max_results: int | None = Field(default=None, ge=1)
    after_id: str | None = None


class SyncContactsResponse(BaseModel):
    """Sync contacts response.

    ``pending`` means the MeWe login still awaits verification and the
    stored contacts were left untouched.
    """

    status: Literal["pending", "synced"]
    contacts: list[ContactInfo] = []
    next_cursor: str | None = None


class SyncContactsUseCase:
    """Use case for loading or refreshing contacts from MeWe."""

    def __init__(
        self,
        account_service: AccountService,
        link_service: AccountLinkService,
        contact_sync_service: ContactSyncService,
        remote_client: RemoteAccountClient,
    ) -> None:
        """Initialize sync contacts use case.

        Args:
            account_service: Account domain service
            link_service: MeWe account link domain service
            contact_sync_service: Contact domain service
            remote_client: Remote account client
        """
        self.account_service = account_service
        self.link_service = link_service
        self.contact_sync_service = contact_sync_service
        self.remote_client = remote_client

    async def execute(self, request: SyncContactsRequest) -> SyncContactsResponse:
        """Execute contact sync flow.

        Steps:
        1. Ensure a usable bearer token (exchanges on first load or expiry)
        2. If verification is still pending, stop without touching contacts
        3. Fetch one page of the MeWe followed list
        4. Replace the stored contacts with it

        A 401 from MeWe clears the bearer token so the next sync
        re-exchanges; the error still propagates.

        Raises:
            NotFoundError: If the account does not exist
            PreconditionFailedError: If the account was never linked
            RemoteRequestFailed: If MeWe rejects the contact fetch
        """
        account = await self.account_service.get_by_id(AccountId(request.account_id))

        with logfire.span("sync_contacts.execute", account_id=account.id):
            token_result = await self.link_service.ensure_bearer_token(account)
            if not token_result.is_ready:
                logfire.info("Contact sync skipped, link pending", account_id=account.id)
                return SyncContactsResponse(status="pending")

            account = token_result.account
            query = ContactQuery(
                search_term=request.search_term,
                cursor=request.cursor,
                page_size=request.page_size,
                max_results=request.max_results,
                after_id=request.after_id,
            )

            try:
                page = await self.remote_client.fetch_contacts(
                    account.bearer_token or "", query
                )
            except RemoteRequestFailed as e:
                if e.status == 401:
                    await self.link_service.invalidate_bearer_token(account)
                raise

            contacts = await self.contact_sync_service.reconcile(
                account.id, page.contacts
            )
            return SyncContactsResponse(
                status="synced",
                contacts=[ContactInfo.from_contact(c) for c in contacts],
                next_cursor=page.next_cursor,
            )
