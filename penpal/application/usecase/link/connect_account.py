"""Connect MeWe account use case."""

import logfire
from pydantic import BaseModel

from penpal.adapter.error import RemoteRequestFailed
from penpal.application.usecase.account.get_account import AccountInfo
from penpal.domain.service import AccountLinkService, AccountService
from penpal.domain.value import AccountId, LinkState


class ConnectAccountRequest(BaseModel):
    """Connect account request."""

    account_id: str


class ConnectAccountResponse(BaseModel):
    """Connect account response."""

    status: LinkState
    account: AccountInfo


class ConnectAccountUseCase:
    """Use case for pulling the MeWe profile onto the account."""

    def __init__(
        self, account_service: AccountService, link_service: AccountLinkService
    ) -> None:
        """Initialize connect account use case.

        Args:
            account_service: Account domain service
            link_service: MeWe account link domain service
        """
        self.account_service = account_service
        self.link_service = link_service

    async def execute(self, request: ConnectAccountRequest) -> ConnectAccountResponse:
        """Ensure a bearer token, then fetch and store the MeWe profile.

        Returns ``pending`` without calling MeWe for the profile while the
        login is still awaiting verification.

        Raises:
            NotFoundError: If the account does not exist
            PreconditionFailedError: If the account was never linked
            RemoteRequestFailed: If MeWe rejects the profile request
        """
        account = await self.account_service.get_by_id(AccountId(request.account_id))
        try:
            result = await self.link_service.connect(account)
        except RemoteRequestFailed as e:
            if e.status == 401:
                current = await self.account_service.get_by_id(account.id)
                await self.link_service.invalidate_bearer_token(current)
            raise

        if result.profile is None:
            logfire.info("MeWe connect pending", account_id=account.id)
        return ConnectAccountResponse(
            status=result.state, account=AccountInfo.from_account(result.account)
        )
