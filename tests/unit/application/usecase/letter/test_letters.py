"""Unit tests for the letter use cases."""

from uuid import uuid4

import pytest

from penpal.application.usecase.letter import (
    CreateLetterRequest,
    CreateLetterUseCase,
    GetLetterRequest,
    GetLetterUseCase,
    ListLettersRequest,
    ListReceivedLettersUseCase,
    ListSentLettersUseCase,
)
from penpal.domain.error import NotFoundError
from penpal.domain.repository import UserAccountRepository
from penpal.domain.service import ContactSyncService
from penpal.domain.value import AccountId, RemoteContact
from tests.factories import NOW, make_account
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

SENDER = AccountId("acct-1")
RECIPIENT_REMOTE_ID = "mewe-friend-1"


async def _sender_with_contact(env) -> None:
    repo = await env.get(UserAccountRepository)
    contacts = await env.get(ContactSyncService)
    await repo.save(make_account(account_id=SENDER))
    await contacts.reconcile(
        SENDER,
        [RemoteContact(remote_id=RECIPIENT_REMOTE_ID, display_name="Ada Lovelace")],
        now=NOW,
    )


def _letter_request(**overrides) -> CreateLetterRequest:
    fields = {
        "sender_id": SENDER,
        "recipient_id": RECIPIENT_REMOTE_ID,
        "description": "Greetings from the seaside",
        "image_url": "https://files.example.com/letters/postcard.jpg",
        "file_type": "image/jpeg",
        "file_name": "postcard.jpg",
    }
    fields.update(overrides)
    return CreateLetterRequest(**fields)


class TestCreateLetterUseCase:
    """Tests for CreateLetterUseCase."""

    @pytest.mark.asyncio
    async def test_letter_to_contact_is_recorded(self, unit_env):
        # Arrange
        await _sender_with_contact(unit_env)
        use_case = await unit_env.get(CreateLetterUseCase)

        # Act
        response = await use_case.execute(_letter_request())

        # Assert
        letter = response.letter
        assert letter.sender_id == SENDER
        assert letter.recipient_id == RECIPIENT_REMOTE_ID
        assert letter.file_name == "postcard.jpg"
        assert letter.thumbnail_url is None

    @pytest.mark.asyncio
    async def test_unknown_recipient_is_rejected(self, unit_env):
        await _sender_with_contact(unit_env)
        use_case = await unit_env.get(CreateLetterUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(_letter_request(recipient_id="stranger"))

    @pytest.mark.asyncio
    async def test_unknown_sender_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateLetterUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(_letter_request())


class TestListAndGetLetters:
    """Tests for listing and reading letters."""

    @pytest.mark.asyncio
    async def test_sent_and_received_lists(self, unit_env):
        # Arrange
        await _sender_with_contact(unit_env)
        repo = await unit_env.get(UserAccountRepository)
        await repo.save(
            make_account(
                account_id="acct-2",
                email="ada@mewe.example",
                remote_user_id=RECIPIENT_REMOTE_ID,
            )
        )
        create = await unit_env.get(CreateLetterUseCase)
        list_sent = await unit_env.get(ListSentLettersUseCase)
        list_received = await unit_env.get(ListReceivedLettersUseCase)
        created = await create.execute(_letter_request())

        # Act
        sent = await list_sent.execute(ListLettersRequest(account_id=SENDER))
        received = await list_received.execute(ListLettersRequest(account_id="acct-2"))
        sender_inbox = await list_received.execute(ListLettersRequest(account_id=SENDER))

        # Assert
        assert [x.letter_id for x in sent.letters] == [created.letter.letter_id]
        assert [x.letter_id for x in received.letters] == [created.letter.letter_id]
        assert sender_inbox.letters == []

    @pytest.mark.asyncio
    async def test_letter_visible_to_sender_and_recipient_only(self, unit_env):
        # Arrange
        await _sender_with_contact(unit_env)
        repo = await unit_env.get(UserAccountRepository)
        await repo.save(
            make_account(account_id="acct-2", remote_user_id=RECIPIENT_REMOTE_ID)
        )
        await repo.save(make_account(account_id="acct-3", remote_user_id="someone"))
        create = await unit_env.get(CreateLetterUseCase)
        get_letter = await unit_env.get(GetLetterUseCase)
        letter_id = (await create.execute(_letter_request())).letter.letter_id

        # Act
        by_sender = await get_letter.execute(
            GetLetterRequest(account_id=SENDER, letter_id=letter_id)
        )
        by_recipient = await get_letter.execute(
            GetLetterRequest(account_id="acct-2", letter_id=letter_id)
        )

        # Assert
        assert by_sender.letter == by_recipient.letter
        with pytest.raises(NotFoundError):
            await get_letter.execute(
                GetLetterRequest(account_id="acct-3", letter_id=letter_id)
            )

    @pytest.mark.asyncio
    async def test_missing_letter_is_not_found(self, unit_env):
        repo = await unit_env.get(UserAccountRepository)
        get_letter = await unit_env.get(GetLetterUseCase)
        await repo.save(make_account())

        with pytest.raises(NotFoundError):
            await get_letter.execute(
                GetLetterRequest(account_id=SENDER, letter_id=str(uuid4()))
            )
