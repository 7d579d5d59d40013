"""Domain layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from penpal.adapter.mewe import MeWeClient
from penpal.config import AuthSettings, MeWeSettings
from penpal.domain.repository import (
    ContactRepository,
    LetterRepository,
    UserAccountRepository,
)
from penpal.domain.service import (
    AccountLinkService,
    AccountService,
    ContactSyncService,
    JWTService,
    LetterService,
    RemoteAccountClient,
)
from penpal.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_remote_account_client(self, mewe_client: MeWeClient) -> RemoteAccountClient:
        """Expose the MeWe client through the domain interface."""
        return mewe_client

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide identity token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_account_service(
        self, account_repository: UserAccountRepository
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(account_repository=account_repository)

    @provide
    def get_link_service(
        self,
        remote_client: RemoteAccountClient,
        account_repository: UserAccountRepository,
        mewe_settings: MeWeSettings,
    ) -> AccountLinkService:
        """Provide MeWe account link domain service."""
        return AccountLinkService(
            remote_client=remote_client,
            account_repository=account_repository,
            token_ttl=timedelta(hours=mewe_settings.default_token_ttl_hours),
        )

    @provide
    def get_contact_sync_service(
        self, contact_repository: ContactRepository
    ) -> ContactSyncService:
        """Provide contact domain service."""
        return ContactSyncService(contact_repository=contact_repository)

    @provide
    def get_letter_service(self, letter_repository: LetterRepository) -> LetterService:
        """Provide letter domain service."""
        return LetterService(letter_repository=letter_repository)
