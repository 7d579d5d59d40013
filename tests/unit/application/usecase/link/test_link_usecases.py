"""Unit tests for the MeWe link use cases."""

import pytest

from penpal.adapter.error import RemoteRequestFailed
from penpal.adapter.mewe import MockMeWeClient
from penpal.application.usecase.link import (
    ConnectAccountRequest,
    ConnectAccountUseCase,
    ExchangeTokenRequest,
    ExchangeTokenUseCase,
    RequestLinkRequest,
    RequestLinkUseCase,
)
from penpal.domain.error import PreconditionFailedError
from penpal.domain.repository import UserAccountRepository
from penpal.domain.value import LinkState, TokenGrant
from tests.factories import FAR_FUTURE, make_account
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLinkHandshake:
    """The three-step handshake through the use cases."""

    @pytest.mark.asyncio
    async def test_full_handshake(self, unit_env):
        """request -> exchange (pending) -> exchange (active) -> connect."""
        # Arrange
        repo = await unit_env.get(UserAccountRepository)
        mewe = await unit_env.get(MockMeWeClient)
        request_link = await unit_env.get(RequestLinkUseCase)
        exchange = await unit_env.get(ExchangeTokenUseCase)
        connect = await unit_env.get(ConnectAccountUseCase)
        await repo.save(make_account())

        # Act / Assert
        linked = await request_link.execute(RequestLinkRequest(account_id="acct-1"))
        assert linked.status == LinkState.LINK_REQUESTED

        mewe.grant = TokenGrant(token=None, pending=True)
        pending = await exchange.execute(ExchangeTokenRequest(account_id="acct-1"))
        assert pending.status == LinkState.PENDING
        assert pending.expires_at is None

        mewe.grant = TokenGrant(token="bt", pending=False)
        active = await exchange.execute(ExchangeTokenRequest(account_id="acct-1"))
        assert active.status == LinkState.ACTIVE
        assert active.expires_at is not None

        connected = await connect.execute(ConnectAccountRequest(account_id="acct-1"))
        assert connected.status == LinkState.ACTIVE
        assert connected.account.remote_user_id == mewe.profile.remote_user_id

    @pytest.mark.asyncio
    async def test_exchange_before_link_fails(self, unit_env):
        repo = await unit_env.get(UserAccountRepository)
        exchange = await unit_env.get(ExchangeTokenUseCase)
        await repo.save(make_account())

        with pytest.raises(PreconditionFailedError):
            await exchange.execute(ExchangeTokenRequest(account_id="acct-1"))

    @pytest.mark.asyncio
    async def test_connect_while_pending_reports_pending(self, unit_env):
        # Arrange
        repo = await unit_env.get(UserAccountRepository)
        mewe = await unit_env.get(MockMeWeClient)
        connect = await unit_env.get(ConnectAccountUseCase)
        mewe.grant = TokenGrant(token="bt", pending=True)
        await repo.save(make_account(login_request_token="lrt"))

        # Act
        response = await connect.execute(ConnectAccountRequest(account_id="acct-1"))

        # Assert
        assert response.status == LinkState.PENDING
        assert response.account.remote_user_id is None

    @pytest.mark.asyncio
    async def test_relink_requests_new_token(self, unit_env):
        # Arrange
        repo = await unit_env.get(UserAccountRepository)
        mewe = await unit_env.get(MockMeWeClient)
        request_link = await unit_env.get(RequestLinkUseCase)
        mewe.login_request_token = "second"
        await repo.save(make_account(login_request_token="first", bearer_token="bt"))

        # Act
        response = await request_link.execute(
            RequestLinkRequest(account_id="acct-1", relink=True)
        )

        # Assert
        assert response.status == LinkState.LINK_REQUESTED
        stored = await repo.find_by_id(make_account().id)
        assert stored.login_request_token == "second"


class TestConnectRejectedToken:
    """A bearer token MeWe rejects while connecting."""

    @pytest.mark.asyncio
    async def test_unauthorized_profile_fetch_clears_bearer_token(self, unit_env):
        # Arrange
        repo = await unit_env.get(UserAccountRepository)
        mewe = await unit_env.get(MockMeWeClient)
        connect = await unit_env.get(ConnectAccountUseCase)
        await repo.save(
            make_account(
                login_request_token="lrt", bearer_token="bt", expires_in=FAR_FUTURE
            )
        )
        mewe.error = RemoteRequestFailed(status=401, body="token revoked")

        # Act / Assert
        with pytest.raises(RemoteRequestFailed):
            await connect.execute(ConnectAccountRequest(account_id="acct-1"))

        stored = await repo.find_by_id(make_account().id)
        assert stored.bearer_token is None
        assert stored.login_request_token == "lrt"
        assert mewe.calls == [("fetch_profile", "bt")]

    @pytest.mark.asyncio
    async def test_other_profile_failures_keep_bearer_token(self, unit_env):
        # Arrange
        repo = await unit_env.get(UserAccountRepository)
        mewe = await unit_env.get(MockMeWeClient)
        connect = await unit_env.get(ConnectAccountUseCase)
        await repo.save(
            make_account(
                login_request_token="lrt", bearer_token="bt", expires_in=FAR_FUTURE
            )
        )
        mewe.error = RemoteRequestFailed(status=503, body="maintenance")

        # Act / Assert
        with pytest.raises(RemoteRequestFailed):
            await connect.execute(ConnectAccountRequest(account_id="acct-1"))
        stored = await repo.find_by_id(make_account().id)
        assert stored.bearer_token == "bt"
