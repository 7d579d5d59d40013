"""Exchange MeWe token use case."""

from datetime import datetime

from pydantic import BaseModel

from penpal.domain.service import AccountLinkService, AccountService
from penpal.domain.value import AccountId, LinkState


class ExchangeTokenRequest(BaseModel):
    """Exchange token request."""

    account_id: str


class ExchangeTokenResponse(BaseModel):
    """Exchange token response.

    ``status`` is ``pending`` until the user approves the login on MeWe.
    """

    status: LinkState
    expires_at: datetime | None


class ExchangeTokenUseCase:
    """Use case for exchanging the login-request token for a bearer token."""

    def __init__(
        self, account_service: AccountService, link_service: AccountLinkService
    ) -> None:
        """Initialize exchange token use case.

        Args:
            account_service: Account domain service
            link_service: MeWe account link domain service
        """
        self.account_service = account_service
        self.link_service = link_service

    async def execute(self, request: ExchangeTokenRequest) -> ExchangeTokenResponse:
        """Exchange the stored login-request token.

        Raises:
            NotFoundError: If the account does not exist
            PreconditionFailedError: If the account was never linked
        """
        account = await self.account_service.get_by_id(AccountId(request.account_id))
        result = await self.link_service.exchange_token(account)
        return ExchangeTokenResponse(
            status=result.state,
            expires_at=result.account.bearer_token_expires_at,
        )
