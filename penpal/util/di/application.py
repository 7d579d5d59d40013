"""Application layer DI providers."""

from dishka import Scope, provide

from penpal.application.usecase.account import GetAccountUseCase, SignInUseCase
from penpal.application.usecase.contact import (
    ImportContactUseCase,
    ListContactsUseCase,
    SyncContactsUseCase,
)
from penpal.application.usecase.letter import (
    CreateLetterUseCase,
    GetLetterUseCase,
    ListReceivedLettersUseCase,
    ListSentLettersUseCase,
)
from penpal.application.usecase.link import (
    ConnectAccountUseCase,
    ExchangeTokenUseCase,
    RequestLinkUseCase,
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Account use cases
    @provide
    def get_sign_in_use_case(
        self,
        jwt_service: JWTService,
        account_service: AccountService,
        link_service: AccountLinkService,
    ) -> SignInUseCase:
        """Provide sign-in use case."""
        return SignInUseCase(
            jwt_service=jwt_service,
            account_service=account_service,
            link_service=link_service,
        )

    @provide
    def get_get_account_use_case(
        self, account_service: AccountService
    ) -> GetAccountUseCase:
        """Provide get account use case."""
        return GetAccountUseCase(account_service=account_service)

    # Link use cases
    @provide
    def get_request_link_use_case(
        self, account_service: AccountService, link_service: AccountLinkService
    ) -> RequestLinkUseCase:
        """Provide request link use case."""
        return RequestLinkUseCase(
            account_service=account_service, link_service=link_service
        )

    @provide
    def get_exchange_token_use_case(
        self, account_service: AccountService, link_service: AccountLinkService
    ) -> ExchangeTokenUseCase:
        """Provide exchange token use case."""
        return ExchangeTokenUseCase(
            account_service=account_service, link_service=link_service
        )

    @provide
    def get_connect_account_use_case(
        self, account_service: AccountService, link_service: AccountLinkService
    ) -> ConnectAccountUseCase:
        """Provide connect account use case."""
        return ConnectAccountUseCase(
            account_service=account_service, link_service=link_service
        )

    # Contact use cases
    @provide
    def get_sync_contacts_use_case(
        self,
        account_service: AccountService,
        link_service: AccountLinkService,
        contact_sync_service: ContactSyncService,
        remote_client: RemoteAccountClient,
    ) -> SyncContactsUseCase:
        """Provide sync contacts use case."""
        return SyncContactsUseCase(
            account_service=account_service,
            link_service=link_service,
            contact_sync_service=contact_sync_service,
            remote_client=remote_client,
        )

    @provide
    def get_list_contacts_use_case(
        self, contact_sync_service: ContactSyncService
    ) -> ListContactsUseCase:
        """Provide list contacts use case."""
        return ListContactsUseCase(contact_sync_service=contact_sync_service)

    @provide
    def get_import_contact_use_case(
        self,
        account_service: AccountService,
        contact_sync_service: ContactSyncService,
    ) -> ImportContactUseCase:
        """Provide import contact use case."""
        return ImportContactUseCase(
            account_service=account_service,
            contact_sync_service=contact_sync_service,
        )

    # Letter use cases
    @provide
    def get_create_letter_use_case(
        self,
        account_service: AccountService,
        contact_sync_service: ContactSyncService,
        letter_service: LetterService,
    ) -> CreateLetterUseCase:
        """Provide create letter use case."""
        return CreateLetterUseCase(
            account_service=account_service,
            contact_sync_service=contact_sync_service,
            letter_service=letter_service,
        )

    @provide
    def get_get_letter_use_case(
        self, account_service: AccountService, letter_service: LetterService
    ) -> GetLetterUseCase:
        """Provide get letter use case."""
        return GetLetterUseCase(
            account_service=account_service, letter_service=letter_service
        )

    @provide
    def get_list_sent_letters_use_case(
        self, account_service: AccountService, letter_service: LetterService
    ) -> ListSentLettersUseCase:
        """Provide list sent letters use case."""
        return ListSentLettersUseCase(
            account_service=account_service, letter_service=letter_service
        )

    @provide
    def get_list_received_letters_use_case(
        self, account_service: AccountService, letter_service: LetterService
    ) -> ListReceivedLettersUseCase:
        """Provide list received letters use case."""
        return ListReceivedLettersUseCase(
            account_service=account_service, letter_service=letter_service
        )
