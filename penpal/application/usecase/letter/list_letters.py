"""List sent and received letters use cases."""

from pydantic import BaseModel

from penpal.application.usecase.letter.get_letter import LetterInfo
from penpal.domain.service import AccountService, LetterService
from penpal.domain.value import AccountId, ContactId


class ListLettersRequest(BaseModel):
    """List letters request."""

    account_id: str


class ListLettersResponse(BaseModel):
    """List letters response, newest first."""

    letters: list[LetterInfo]


class ListSentLettersUseCase:
    """Use case for listing letters the account sent."""

    def __init__(
        self, account_service: AccountService, letter_service: LetterService
    ) -> None:
        self.account_service = account_service
        self.letter_service = letter_service

    async def execute(self, request: ListLettersRequest) -> ListLettersResponse:
        account = await self.account_service.get_by_id(AccountId(request.account_id))
        letters = await self.letter_service.list_sent(account.id)
        return ListLettersResponse(letters=[LetterInfo.from_letter(x) for x in letters])


class ListReceivedLettersUseCase:
    """Use case for listing letters addressed to the account.

    Letters are addressed by MeWe user id, so an account that never
    connected its MeWe profile has received nothing.
    """

    def __init__(
        self, account_service: AccountService, letter_service: LetterService
    ) -> None:
        self.account_service = account_service
        self.letter_service = letter_service

    async def execute(self, request: ListLettersRequest) -> ListLettersResponse:
        account = await self.account_service.get_by_id(AccountId(request.account_id))
        if not account.remote_user_id:
            return ListLettersResponse(letters=[])

        letters = await self.letter_service.list_received(
            ContactId(account.remote_user_id)
        )
        return ListLettersResponse(letters=[LetterInfo.from_letter(x) for x in letters])
