"""Letter use cases."""

from .create_letter import (
    CreateLetterRequest,
    CreateLetterResponse,
    CreateLetterUseCase,
)
from .get_letter import GetLetterRequest, GetLetterResponse, GetLetterUseCase, LetterInfo
from .list_letters import (
    ListLettersRequest,
    ListLettersResponse,
    ListReceivedLettersUseCase,
    ListSentLettersUseCase,
)

__all__ = [
    "CreateLetterRequest",
    "CreateLetterResponse",
    "CreateLetterUseCase",
    "GetLetterRequest",
    "GetLetterResponse",
    "GetLetterUseCase",
    "LetterInfo",
    "ListLettersRequest",
    "ListLettersResponse",
    "ListReceivedLettersUseCase",
    "ListSentLettersUseCase",
]
