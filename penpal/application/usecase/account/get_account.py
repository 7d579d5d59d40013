"""Get account use case."""

from datetime import datetime

from pydantic import BaseModel

from penpal.application.usecase.base import BaseUseCase
from penpal.domain.model import UserAccount
from penpal.domain.service import AccountService
from penpal.domain.value import AccountId, LinkState


class AccountInfo(BaseModel):
    """Account as exposed by the API.

    Tokens are never exposed; only the link state derived from them.
    """

    account_id: str
    email: str | None
    link_state: LinkState
    bearer_token_expires_at: datetime | None
    remote_user_id: str | None
    display_name: str | None
    photo_url: str | None
    created_at: datetime

    @classmethod
    def from_account(cls, account: UserAccount) -> "AccountInfo":
        return cls(
            account_id=account.id,
            email=account.email,
            link_state=account.link_state(),
            bearer_token_expires_at=account.bearer_token_expires_at,
            remote_user_id=account.remote_user_id,
            display_name=account.display_name,
            photo_url=account.photo_url,
            created_at=account.created_at,
        )


class GetAccountRequest(BaseModel):
    """Get account request."""

    account_id: str


class GetAccountResponse(BaseModel):
    """Get account response."""

    account: AccountInfo


class GetAccountUseCase(BaseUseCase):
    """Use case for reading the signed-in account."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize get account use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: GetAccountRequest) -> GetAccountResponse:
        """Load the account and compute its link state.

        Raises:
            NotFoundError: If the account has never signed in
        """
        account = await self.account_service.get_by_id(AccountId(request.account_id))
        return GetAccountResponse(account=AccountInfo.from_account(account))
