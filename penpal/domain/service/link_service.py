"""MeWe account linking domain service.

Owns the per-account token lifecycle:

    unlinked -> link_requested -> pending -> active -> (expired)

Every transition computes a new ``UserAccount`` value and persists the
changed fields through the repository's merge update.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

import logfire
from pydantic import ValidationError as PydanticValidationError

from penpal.domain.error import (
    NotFoundError,
    PreconditionFailedError,
    ValidationError,
)
from penpal.domain.model.account import UserAccount, utcnow
from penpal.domain.repository.account import UserAccountRepository
from penpal.domain.value import (
    ContactPage,
    ContactQuery,
    Email,
    LinkState,
    RemoteProfile,
    TokenGrant,
)

from .base import Service

BEARER_FIELDS = ("bearer_token", "bearer_token_expires_at", "bearer_token_pending")


class RemoteAccountClient:
    """Remote account service interface.

    Implementations must raise before touching the network when their
    credentials are not configured.
    """

    async def request_login(self, email: str) -> str:
        """Request a login-request token for an email.

        Args:
            email: Email of the remote account

        Returns:
            Opaque login-request token
        """
        raise NotImplementedError

    async def exchange_token(self, login_request_token: str) -> TokenGrant:
        """Exchange a login-request token for a bearer token.

        Args:
            login_request_token: Token from ``request_login``

        Returns:
            Token grant, possibly pending verification
        """
        raise NotImplementedError

    async def fetch_profile(self, bearer_token: str) -> RemoteProfile:
        """Fetch the remote profile of the linked user.

        Args:
            bearer_token: Non-pending bearer token

        Returns:
            Remote profile
        """
        raise NotImplementedError

    async def fetch_contacts(
        self, bearer_token: str, query: ContactQuery | None = None
    ) -> ContactPage:
        """Fetch the linked user's contact list.

        Args:
            bearer_token: Non-pending bearer token
            query: Optional search term and paging

        Returns:
            One page of contacts
        """
        raise NotImplementedError


@dataclass(frozen=True)
class TokenExchangeResult:
    """Account after a token exchange and the state it ended in."""

    account: UserAccount
    state: LinkState

    @property
    def is_ready(self) -> bool:
        return self.state == LinkState.ACTIVE


@dataclass(frozen=True)
class ConnectResult:
    """Account after the connect step, with the fetched profile if any."""

    account: UserAccount
    state: LinkState
    profile: RemoteProfile | None = None


class AccountLinkService(Service):
    """Domain service for linking an account to MeWe."""

    def __init__(
        self,
        remote_client: RemoteAccountClient,
        account_repository: UserAccountRepository,
        token_ttl: timedelta = timedelta(hours=24),
    ) -> None:
        """Initialize account link service.

        Args:
            remote_client: Remote account service client
            account_repository: User account repository
            token_ttl: Bearer token lifetime when the remote omits an expiry
        """
        self.remote_client = remote_client
        self.account_repository = account_repository
        self.token_ttl = token_ttl

    async def request_link(
        self, account: UserAccount, relink: bool = False, now: datetime | None = None
    ) -> UserAccount:
        """Obtain and store a login-request token for the account's email.

        A token already on file is kept unless ``relink`` is set; re-linking
        also forgets the bearer token derived from the old one.

        Args:
            account: Account to link
            relink: Replace an existing login-request token
            now: Reference time

        Returns:
            Updated account

        Raises:
            PreconditionFailedError: If the account has no email
            ValidationError: If the account email is not an email address
        """
        now = now or utcnow()
        with logfire.span(
            "link_service.request_link", account_id=account.id, relink=relink
        ):
            if not account.email:
                raise PreconditionFailedError(
                    "MeWe linking requires an email address on the account"
                )

            if account.login_request_token and not relink:
                logfire.info(
                    "Login request token already on file, keeping it",
                    account_id=account.id,
                )
                return account

            try:
                email = Email(account.email)
            except PydanticValidationError:
                logfire.warn("Account email is not usable", account_id=account.id)
                raise ValidationError(
                    "MeWe linking requires a valid email address on the account"
                )

            token = await self.remote_client.request_login(email.root)

            updated = account.with_login_request_token(token, now)
            stored = await self._persist(
                updated, "login_request_token", *BEARER_FIELDS, "updated_at"
            )
            logfire.info(
                "Login request token saved", account_id=account.id, relink=relink
            )
            return stored

    async def exchange_token(
        self, account: UserAccount, now: datetime | None = None
    ) -> TokenExchangeResult:
        """Exchange the stored login-request token for a bearer token.

        The bearer token is stored even while pending so a later call can
        reuse it; the account only becomes active once the remote side stops
        reporting it as pending.

        Args:
            account: Account holding a login-request token
            now: Reference time

        Returns:
            Updated account and resulting state (pending or active)

        Raises:
            PreconditionFailedError: If the account was never linked
        """
        now = now or utcnow()
        with logfire.span("link_service.exchange_token", account_id=account.id):
            if not account.login_request_token:
                raise PreconditionFailedError("must link account first")

            grant = await self.remote_client.exchange_token(
                account.login_request_token
            )

            if not grant.token:
                if grant.pending:
                    logfire.info(
                        "Token exchange pending without a token",
                        account_id=account.id,
                    )
                    return TokenExchangeResult(account=account, state=LinkState.PENDING)
                raise ValidationError("MeWe token exchange returned no token")

            updated = account.with_token_grant(grant, now, self.token_ttl)
            stored = await self._persist(updated, *BEARER_FIELDS, "updated_at")

            state = LinkState.PENDING if grant.pending else LinkState.ACTIVE
            logfire.info(
                "Bearer token saved",
                account_id=account.id,
                state=state.value,
                expires_at=stored.bearer_token_expires_at,
            )
            return TokenExchangeResult(account=stored, state=state)

    async def ensure_bearer_token(
        self, account: UserAccount, now: datetime | None = None
    ) -> TokenExchangeResult:
        """Make sure the account holds a usable bearer token.

        An active token is used as-is. A missing, pending or expired token
        triggers a fresh exchange; a stale token is never handed out.

        Args:
            account: Account needing a bearer token
            now: Reference time

        Returns:
            Account and state; only ``active`` carries a usable token

        Raises:
            PreconditionFailedError: If the account was never linked
        """
        now = now or utcnow()
        state = account.link_state(now)
        logfire.info(
            "Checking bearer token", account_id=account.id, state=state.value
        )

        if state == LinkState.ACTIVE:
            return TokenExchangeResult(account=account, state=state)
        if state == LinkState.UNLINKED:
            raise PreconditionFailedError("must link account first")

        return await self.exchange_token(account, now)

    async def connect(
        self, account: UserAccount, now: datetime | None = None
    ) -> ConnectResult:
        """Fetch the MeWe profile and store it on the account.

        Args:
            account: Account to connect
            now: Reference time

        Returns:
            Connect result; ``profile`` is None while verification is pending

        Raises:
            PreconditionFailedError: If the account was never linked
        """
        now = now or utcnow()
        with logfire.span("link_service.connect", account_id=account.id):
            result = await self.ensure_bearer_token(account, now)
            if not result.is_ready:
                return ConnectResult(account=result.account, state=result.state)

            bearer_token = result.account.bearer_token or ""
            profile = await self.remote_client.fetch_profile(bearer_token)

            updated = result.account.with_profile(profile, now)
            stored = await self.account_repository.update_fields(
                updated.id,
                remote_user_id=updated.remote_user_id,
                display_name=updated.display_name,
                photo_url=updated.photo_url,
                updated_at=updated.updated_at,
            )
            if stored is None:
                raise NotFoundError("UserAccount", account.id)

            logfire.info(
                "MeWe profile saved",
                account_id=account.id,
                remote_user_id=profile.remote_user_id,
            )
            return ConnectResult(account=stored, state=LinkState.ACTIVE, profile=profile)

    async def invalidate_bearer_token(
        self, account: UserAccount, now: datetime | None = None
    ) -> UserAccount:
        """Forget a bearer token the remote side rejected.

        The login-request token is kept so the next call can re-exchange.

        Args:
            account: Account whose token was rejected
            now: Reference time

        Returns:
            Updated account
        """
        now = now or utcnow()
        logfire.warn("Invalidating rejected bearer token", account_id=account.id)
        return await self._persist(
            account.without_bearer_token(now), *BEARER_FIELDS, "updated_at"
        )

    async def _persist(self, account: UserAccount, *names: str) -> UserAccount:
        """Write the named fields of ``account``, clearing those set to None."""
        values = {name: getattr(account, name) for name in names}
        stored = await self.account_repository.update_fields(account.id, **values)

        to_clear = [name for name, value in values.items() if value is None]
        if stored is not None and to_clear:
            stored = await self.account_repository.clear_fields(account.id, *to_clear)

        if stored is None:
            raise NotFoundError("UserAccount", account.id)
        return stored
