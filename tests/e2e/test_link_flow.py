"""End-to-end tests for sign-in, MeWe linking and contact sync."""

import pytest
from fastapi.testclient import TestClient

from penpal.interface.api.app import create_app
from penpal.util.di.container import setup_di
from tests.di import build_test_container
from tests.factories import make_identity_token


def _client(unmock=None) -> TestClient:
    app_instance = create_app()
    setup_di(app_instance, build_test_container(unmock=unmock))
    return TestClient(app_instance)


@pytest.fixture
def client():
    """Create test client with test container."""
    return _client()


def _sign_in(client: TestClient, email: str | None = "ada@example.com"):
    token = make_identity_token("acct-e2e", email)
    return client.post("/auth/session", json={"id_token": token})


class TestHealth:
    def test_health_reports_mewe_configuration(self, client):
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert isinstance(data["mewe_configured"], bool)


class TestAuthentication:
    """Cookie authentication on protected routes."""

    @pytest.mark.parametrize(
        "method, path",
        [
            ("get", "/accounts/me"),
            ("post", "/link/request"),
            ("post", "/link/token"),
            ("post", "/link/connect"),
            ("get", "/contacts"),
            ("post", "/contacts/sync"),
            ("get", "/letters/sent"),
        ],
    )
    def test_requires_cookie(self, client, method, path):
        response = getattr(client, method)(path)

        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"

    def test_rejects_garbage_cookie(self, client):
        client.cookies.set("auth_token", "not-a-jwt")

        response = client.get("/accounts/me")

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid authentication token"

    def test_invalid_identity_token_is_rejected(self, client):
        response = client.post("/auth/session", json={"id_token": "not-a-jwt"})

        assert response.status_code == 401

    def test_logout_clears_cookie(self, client):
        _sign_in(client)

        response = client.post("/auth/logout")

        assert response.status_code == 204
        assert "auth_token" not in client.cookies


class TestLinkFlow:
    """Sign-in through to a synced contact list against the mock MeWe client."""

    def test_sign_in_requests_link(self, client):
        # Act
        response = _sign_in(client)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["created"] is True
        assert data["account"]["link_state"] == "link_requested"
        assert "auth_token" in client.cookies

    def test_sign_in_without_email_stays_unlinked(self, client):
        response = _sign_in(client, email=None)

        assert response.status_code == 200
        assert response.json()["account"]["link_state"] == "unlinked"

    def test_malformed_email_claim_is_a_client_error(self, client):
        response = _sign_in(client, email="not-an-email")

        assert response.status_code == 400
        assert "valid email" in response.json()["detail"]
        assert "auth_token" in client.cookies

    def test_second_sign_in_is_not_created(self, client):
        _sign_in(client)

        response = _sign_in(client)

        assert response.json()["created"] is False

    def test_exchange_before_link_conflicts(self, client):
        _sign_in(client, email=None)

        response = client.post("/link/token")

        assert response.status_code == 409
        assert response.json()["detail"] == "must link account first"

    def test_full_flow(self, client):
        # Arrange
        _sign_in(client)

        # Act
        token = client.post("/link/token")
        connect = client.post("/link/connect")
        sync = client.post("/contacts/sync", json={"search_term": "a"})
        listed = client.get("/contacts")
        me = client.get("/accounts/me")

        # Assert
        assert token.status_code == 200
        assert token.json()["status"] == "active"

        assert connect.status_code == 200
        assert connect.json()["account"]["remote_user_id"] == "mock-mewe-user"

        assert sync.status_code == 200
        assert sync.json()["status"] == "synced"

        names = [c["display_name"] for c in listed.json()["contacts"]]
        assert names == ["Ada Lovelace", "Grace Hopper"]

        account = me.json()["account"]
        assert account["link_state"] == "active"
        assert "bearer_token" not in account

    def test_import_contact_then_sync_replaces_it(self, client):
        # Arrange
        _sign_in(client)
        imported = client.post("/contacts/import", json={"display_name": "Pen Friend"})

        # Act
        client.post("/contacts/sync")
        listed = client.get("/contacts")

        # Assert
        assert imported.status_code == 201
        ids = [c["contact_id"] for c in listed.json()["contacts"]]
        assert ids == ["mewe-friend-1", "mewe-friend-2"]


class TestUnconfiguredMeWe:
    """The real MeWe client without credentials."""

    def test_sign_in_reports_unconfigured_integration(self, monkeypatch):
        # Arrange
        for name in ("MEWE__APP_ID", "MEWE__API_KEY", "MEWE__HOST"):
            monkeypatch.delenv(name, raising=False)
        client = _client(unmock={"mewe"})

        # Act
        response = _sign_in(client)

        # Assert
        assert response.status_code == 503
        assert response.json()["detail"] == "MeWe integration is not configured"
        assert "auth_token" in client.cookies
