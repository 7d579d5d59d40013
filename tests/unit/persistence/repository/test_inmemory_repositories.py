"""Tests for the in-memory repositories used by the test container."""

from datetime import timedelta
from uuid import uuid4

import pytest

from penpal.domain.model import Contact, Letter
from penpal.domain.value import AccountId, ContactId, LetterId
from penpal.persistence.repository.inmemory import (
    InMemoryContactRepository,
    InMemoryLetterRepository,
    InMemoryUserAccountRepository,
)
from tests.factories import NOW, make_account


class TestInMemoryUserAccountRepository:
    @pytest.mark.asyncio
    async def test_update_fields_ignores_none(self):
        # Arrange
        repo = InMemoryUserAccountRepository()
        await repo.save(make_account(login_request_token="lrt"))

        # Act
        updated = await repo.update_fields(
            AccountId("acct-1"), login_request_token=None, remote_user_id="mewe-1"
        )

        # Assert
        assert updated.login_request_token == "lrt"
        assert updated.remote_user_id == "mewe-1"

    @pytest.mark.asyncio
    async def test_clear_fields_resets_named_fields(self):
        repo = InMemoryUserAccountRepository()
        await repo.save(make_account(login_request_token="lrt", bearer_token="bt"))

        cleared = await repo.clear_fields(
            AccountId("acct-1"), "bearer_token", "bearer_token_expires_at"
        )

        assert cleared.bearer_token is None
        assert cleared.bearer_token_expires_at is None
        assert cleared.login_request_token == "lrt"

    @pytest.mark.asyncio
    async def test_updates_on_missing_account_return_none(self):
        repo = InMemoryUserAccountRepository()

        assert await repo.update_fields(AccountId("nobody"), email="x@y.z") is None
        assert await repo.clear_fields(AccountId("nobody"), "email") is None


class TestInMemoryContactRepository:
    @pytest.mark.asyncio
    async def test_contacts_are_scoped_by_owner(self):
        # Arrange
        repo = InMemoryContactRepository()
        for owner in ("acct-1", "acct-2"):
            await repo.save(
                Contact(
                    id=ContactId("mewe-friend-1"),
                    owner_id=AccountId(owner),
                    display_name=f"Friend of {owner}",
                )
            )

        # Act
        await repo.delete(AccountId("acct-1"), ContactId("mewe-friend-1"))

        # Assert
        assert await repo.find_all_by_owner(AccountId("acct-1")) == []
        remaining = await repo.find_by_id(AccountId("acct-2"), ContactId("mewe-friend-1"))
        assert remaining.display_name == "Friend of acct-2"

    @pytest.mark.asyncio
    async def test_delete_missing_contact_is_noop(self):
        repo = InMemoryContactRepository()

        await repo.delete(AccountId("acct-1"), ContactId("nobody"))


class TestInMemoryLetterRepository:
    @pytest.mark.asyncio
    async def test_lists_are_newest_first(self):
        # Arrange
        repo = InMemoryLetterRepository()
        older, newer = (
            Letter(
                id=LetterId(uuid4()),
                sender_id=AccountId("acct-1"),
                recipient_id=ContactId("mewe-friend-1"),
                description=text,
                image_url="https://files.example.com/x.jpg",
                created_at=created_at,
            )
            for text, created_at in (
                ("first", NOW),
                ("second", NOW + timedelta(minutes=5)),
            )
        )
        await repo.save(older)
        await repo.save(newer)

        # Act
        sent = await repo.find_sent(AccountId("acct-1"))
        received = await repo.find_received(ContactId("mewe-friend-1"))

        # Assert
        assert [x.description for x in sent] == ["second", "first"]
        assert received == sent
