"""Sign-in use case."""

import logfire
from pydantic import BaseModel

from penpal.application.usecase.account.get_account import AccountInfo
from penpal.domain.service import AccountLinkService, AccountService, JWTService
from penpal.domain.value import AccountId


class SignInRequest(BaseModel):
    """Sign-in request."""

    token: str  # Identity token from the identity service


class SignInResponse(BaseModel):
    """Sign-in response."""

    account: AccountInfo
    created: bool


class SignInUseCase:
    """Use case for signing in with an identity token."""

    def __init__(
        self,
        jwt_service: JWTService,
        account_service: AccountService,
        link_service: AccountLinkService,
    ) -> None:
        """Initialize sign-in use case.

        Args:
            jwt_service: Identity token domain service
            account_service: Account domain service
            link_service: MeWe account link domain service
        """
        self.jwt_service = jwt_service
        self.account_service = account_service
        self.link_service = link_service

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Execute sign-in flow.

        Steps:
        1. Verify the identity token
        2. Load the account, creating it on first sign-in
        3. If the account has an email but no login-request token, request
           a MeWe link and wait for it

        A failed link request propagates after the account was saved; the
        user can retry through the link endpoint.

        Args:
            request: Request with the identity token

        Returns:
            Signed-in account and whether it was just created

        Raises:
            JWTError: If the token is invalid or expired
        """
        payload = self.jwt_service.verify_token(request.token)
        account_id = AccountId(payload.account_id)

        with logfire.span("sign_in.execute", account_id=account_id):
            account, created = await self.account_service.get_or_create(
                account_id, payload.email
            )

            if account.email and not account.login_request_token:
                logfire.info("Requesting MeWe link on sign-in", account_id=account_id)
                account = await self.link_service.request_link(account)

            return SignInResponse(
                account=AccountInfo.from_account(account), created=created
            )
