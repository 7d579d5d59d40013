"""MeWe developer API client.

Wraps the four endpoints used to link a MeWe account: login request,
token exchange, profile, and the followed list.
"""

from typing import Any, TypeVar

import httpx
import logfire
from pydantic import BaseModel, ValidationError

from penpal.adapter.error import (
    RemoteRequestFailed,
    RemoteResponseInvalid,
    RemoteServiceUnavailable,
    RemoteServiceUnconfigured,
)
from penpal.adapter.mewe.wire import (
    FollowedResponse,
    MeResponse,
    SigninResponse,
    TokenResponse,
)
from penpal.config import MeWeSettings
from penpal.domain.service.link_service import RemoteAccountClient
from penpal.domain.value import (
    ContactPage,
    ContactQuery,
    RemoteContact,
    RemoteProfile,
    TokenGrant,
)

# Permission scope MeWe requires on social graph reads
SOCIAL_GRAPH_PERMISSION = "user_social_graph"

WireT = TypeVar("WireT", bound=BaseModel)


class MeWeClient(RemoteAccountClient):
    """Base class for MeWe clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealMeWeClient(MeWeClient):
    """HTTP client for the MeWe developer API."""

    def __init__(
        self,
        settings: MeWeSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize MeWe client.

        Args:
            settings: MeWe credentials and host
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.settings = settings
        self.transport = transport

    def _require_configured(self) -> None:
        """Fail before any network call if credentials are missing.

        Raises:
            RemoteServiceUnconfigured: If app id, API key or host is unset
        """
        missing = [
            name
            for name, value in (
                ("app_id", self.settings.app_id),
                ("api_key", self.settings.api_key),
                ("host", self.settings.host),
            )
            if not value
        ]
        if missing:
            logfire.error("MeWe client not configured", missing=missing)
            raise RemoteServiceUnconfigured(missing)

    def _url(self, path: str) -> str:
        host = (self.settings.host or "").rstrip("/")
        base_path = self.settings.base_path.rstrip("/")
        return f"{host}{base_path}{path}"

    def _headers(self, bearer_token: str | None = None) -> dict[str, str]:
        headers = {"X-App-Id": self.settings.app_id or "", "accept": "*/*"}
        if bearer_token:
            headers["Authorization"] = f"Bearer {bearer_token}"
        return headers

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        wire_model: type[WireT],
        *,
        headers: dict[str, str],
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> WireT:
        """Send one request and parse its body into ``wire_model``.

        Raises:
            RemoteServiceUnavailable: On transport errors
            RemoteRequestFailed: On any non-2xx status
            RemoteResponseInvalid: If the body does not match ``wire_model``
        """
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.request(
                    method,
                    self._url(path),
                    headers=headers,
                    params=params,
                    json=json,
                    timeout=self.settings.timeout_seconds,
                )
        except httpx.HTTPError as e:
            logfire.error("MeWe HTTP error", operation=operation, error=str(e))
            raise RemoteServiceUnavailable(
                f"MeWe API is currently unavailable ({operation}): {e}"
            ) from e

        if not response.is_success:
            logfire.error(
                "MeWe request failed",
                operation=operation,
                status_code=response.status_code,
                error=response.text,
            )
            raise RemoteRequestFailed(
                status=response.status_code, body=response.text, operation=operation
            )

        try:
            return wire_model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logfire.error(
                "MeWe response did not match expected shape",
                operation=operation,
                error=str(e),
            )
            raise RemoteResponseInvalid(f"Unexpected {operation} response: {e}") from e

    async def request_login(self, email: str) -> str:
        """Request a login-request token for the given email.

        Args:
            email: Email (MeWe username) of the account to link

        Returns:
            Opaque login-request token
        """
        self._require_configured()
        headers = self._headers()
        headers["X-Api-Key"] = self.settings.api_key or ""

        result = await self._request(
            "MeWe signin",
            "POST",
            "/signin",
            SigninResponse,
            headers=headers,
            json={"username": email},
        )
        logfire.info("MeWe login request token obtained")
        return result.login_request_token

    async def exchange_token(self, login_request_token: str) -> TokenGrant:
        """Exchange a login-request token for a bearer token.

        Args:
            login_request_token: Token from ``request_login`` (sent as ``otp``)

        Returns:
            Token grant, possibly still pending verification
        """
        self._require_configured()
        result = await self._request(
            "MeWe token request",
            "GET",
            "/token",
            TokenResponse,
            headers=self._headers(),
            params={"otp": login_request_token},
        )
        grant = result.to_grant()
        logfire.info(
            "MeWe token exchanged",
            pending=grant.pending,
            has_token=bool(grant.token),
            has_expiry=grant.expires_at is not None,
        )
        return grant

    async def fetch_profile(self, bearer_token: str) -> RemoteProfile:
        """Fetch the linked user's MeWe profile.

        Args:
            bearer_token: Non-pending bearer token

        Returns:
            Profile of the linked MeWe user
        """
        self._require_configured()
        result = await self._request(
            "MeWe user info request",
            "GET",
            "/me",
            MeResponse,
            headers=self._headers(bearer_token),
        )
        return result.to_profile()

    async def fetch_contacts(
        self, bearer_token: str, query: ContactQuery | None = None
    ) -> ContactPage:
        """Fetch the users followed by the linked MeWe user.

        Args:
            bearer_token: Non-pending bearer token
            query: Optional search term and paging; absent values are not sent

        Returns:
            One page of followed users
        """
        self._require_configured()
        headers = self._headers(bearer_token)
        headers["requiredPermissions"] = SOCIAL_GRAPH_PERMISSION

        result = await self._request(
            "MeWe contacts request",
            "GET",
            "/socialgraph/followed",
            FollowedResponse,
            headers=headers,
            params=contact_query_params(query),
        )
        page = result.to_page()
        logfire.info(
            "MeWe contacts fetched",
            count=len(page.contacts),
            has_next_page=page.next_cursor is not None,
        )
        return page


def contact_query_params(query: ContactQuery | None) -> dict[str, str]:
    """Map a contact query onto MeWe query parameters, skipping empty values."""
    if query is None:
        return {}
    candidates = {
        "searchStr": query.search_term,
        "nextId": query.cursor,
        "limit": query.page_size,
        "maxResults": query.max_results,
        "afterId": query.after_id,
    }
    return {name: str(value) for name, value in candidates.items() if value}


class MockMeWeClient(MeWeClient):
    """Mock MeWe client for testing.

    Returns deterministic data without network calls. Tests can script the
    responses by assigning the public attributes, or set ``error`` to make
    every call raise it. Calls are recorded in ``calls``.
    """

    def __init__(self) -> None:
        """Initialize mock client with default scripted responses."""
        self.login_request_token = "mock-login-request-token"
        self.grant = TokenGrant(token="mock-bearer-token", pending=False)
        self.profile = RemoteProfile(
            remote_user_id="mock-mewe-user",
            display_name="Mock MeWe User",
            photo_url="https://example.com/mock.jpg",
        )
        self.contacts: list[RemoteContact] = [
            RemoteContact(
                remote_id="mewe-friend-1",
                display_name="Ada Lovelace",
                handle="ada",
                photo_url="https://example.com/ada.jpg",
            ),
            RemoteContact(
                remote_id="mewe-friend-2",
                display_name="Grace Hopper",
                handle="grace",
                photo_url="https://example.com/grace.jpg",
            ),
        ]
        self.error: Exception | None = None
        self.calls: list[tuple[str, Any]] = []

    def _record(self, name: str, argument: Any) -> None:
        self.calls.append((name, argument))
        if self.error is not None:
            raise self.error

    async def request_login(self, email: str) -> str:
        """Return the scripted login-request token."""
        self._record("request_login", email)
        return self.login_request_token

    async def exchange_token(self, login_request_token: str) -> TokenGrant:
        """Return the scripted token grant."""
        self._record("exchange_token", login_request_token)
        return self.grant

    async def fetch_profile(self, bearer_token: str) -> RemoteProfile:
        """Return the scripted profile."""
        self._record("fetch_profile", bearer_token)
        return self.profile

    async def fetch_contacts(
        self, bearer_token: str, query: ContactQuery | None = None
    ) -> ContactPage:
        """Return the scripted contact list as a single page."""
        self._record("fetch_contacts", bearer_token)
        return ContactPage(contacts=list(self.contacts))
