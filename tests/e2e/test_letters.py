"""End-to-end tests for letter endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from penpal.interface.api.app import create_app
from penpal.util.di.container import setup_di
from tests.di import build_test_container
from tests.factories import make_identity_token


@pytest.fixture
def client():
    """Create a test client signed in with synced contacts."""
    app_instance = create_app()
    setup_di(app_instance, build_test_container())
    client = TestClient(app_instance)

    token = make_identity_token("acct-e2e", "ada@example.com")
    client.post("/auth/session", json={"id_token": token})
    client.post("/contacts/sync")
    return client


LETTER = {
    "recipient_id": "mewe-friend-1",
    "description": "Greetings from the seaside",
    "image_url": "https://files.example.com/letters/postcard.jpg",
    "file_type": "image/jpeg",
    "file_name": "postcard.jpg",
}


class TestLetterEndpoints:
    def test_create_and_read_letter(self, client):
        # Act
        created = client.post("/letters", json=LETTER)
        letter_id = created.json()["letter"]["letter_id"]
        fetched = client.get(f"/letters/{letter_id}")
        sent = client.get("/letters/sent")

        # Assert
        assert created.status_code == 201
        assert fetched.status_code == 200
        assert fetched.json()["letter"]["description"] == LETTER["description"]
        assert [x["letter_id"] for x in sent.json()["letters"]] == [letter_id]

    def test_letter_to_unknown_contact_is_not_found(self, client):
        response = client.post("/letters", json={**LETTER, "recipient_id": "stranger"})

        assert response.status_code == 404

    def test_empty_description_is_rejected(self, client):
        response = client.post("/letters", json={**LETTER, "description": ""})

        assert response.status_code == 422

    def test_received_is_empty_before_connect(self, client):
        response = client.get("/letters/received")

        assert response.status_code == 200
        assert response.json()["letters"] == []

    def test_missing_letter_is_not_found(self, client):
        response = client.get(f"/letters/{uuid4()}")

        assert response.status_code == 404

    def test_malformed_letter_id_is_rejected(self, client):
        response = client.get("/letters/not-a-uuid")

        assert response.status_code == 422
