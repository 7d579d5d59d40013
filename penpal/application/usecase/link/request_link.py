"""Request MeWe link use case."""

from pydantic import BaseModel

from penpal.application.usecase.account.get_account import AccountInfo
from penpal.domain.service import AccountLinkService, AccountService
from penpal.domain.value import AccountId, LinkState


class RequestLinkRequest(BaseModel):
    """Request link request."""

    account_id: str
    relink: bool = False  # Replace a login-request token already on file


class RequestLinkResponse(BaseModel):
    """Request link response."""

    status: LinkState
    account: AccountInfo


class RequestLinkUseCase:
    """Use case for starting (or restarting) the MeWe link handshake."""

    def __init__(
        self, account_service: AccountService, link_service: AccountLinkService
    ) -> None:
        """Initialize request link use case.

        Args:
            account_service: Account domain service
            link_service: MeWe account link domain service
        """
        self.account_service = account_service
        self.link_service = link_service

    async def execute(self, request: RequestLinkRequest) -> RequestLinkResponse:
        """Obtain a login-request token for the account's email.

        Raises:
            NotFoundError: If the account does not exist
            PreconditionFailedError: If the account has no email
            RemoteServiceUnconfigured: If MeWe credentials are missing
            RemoteRequestFailed: If MeWe rejects the request
        """
        account = await self.account_service.get_by_id(AccountId(request.account_id))
        account = await self.link_service.request_link(account, relink=request.relink)
        return RequestLinkResponse(
            status=account.link_state(), account=AccountInfo.from_account(account)
        )
