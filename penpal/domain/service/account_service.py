"""User account domain service."""

import logfire

from penpal.domain.error import NotFoundError
from penpal.domain.model.account import UserAccount
from penpal.domain.repository.account import UserAccountRepository
from penpal.domain.value import AccountId

from .base import Service


class AccountService(Service):
    """Domain service for user account lookups and creation."""

    def __init__(self, account_repository: UserAccountRepository) -> None:
        """Initialize account service.

        Args:
            account_repository: User account repository
        """
        self.account_repository = account_repository

    async def get_by_id(self, account_id: AccountId) -> UserAccount:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            User account

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.get_by_id", account_id=account_id):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                logfire.warn("Account not found", account_id=account_id)
                raise NotFoundError("UserAccount", account_id)
            return account

    async def get_or_create(
        self, account_id: AccountId, email: str | None = None
    ) -> tuple[UserAccount, bool]:
        """Get the account for a verified identity, creating it on first sign-in.

        An email learned from the identity token is merged into an existing
        account that has none.

        Args:
            account_id: Account ID from the identity token
            email: Email from the identity token, if any

        Returns:
            Tuple of (account, created)
        """
        with logfire.span("account_service.get_or_create", account_id=account_id):
            account = await self.account_repository.find_by_id(account_id)
            if account is None:
                account = await self.account_repository.save(
                    UserAccount(id=account_id, email=email)
                )
                logfire.info(
                    "Account created", account_id=account_id, has_email=bool(email)
                )
                return account, True

            if email and not account.email:
                updated = await self.account_repository.update_fields(
                    account_id, email=email
                )
                if updated is not None:
                    account = updated
                logfire.info("Account email recorded", account_id=account_id)

            return account, False
