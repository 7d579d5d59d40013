"""Account use cases."""

from .get_account import (
    AccountInfo,
    GetAccountRequest,
    GetAccountResponse,
    GetAccountUseCase,
)
from .sign_in import SignInRequest, SignInResponse, SignInUseCase

__all__ = [
    "AccountInfo",
    "GetAccountRequest",
    "GetAccountResponse",
    "GetAccountUseCase",
    "SignInRequest",
    "SignInResponse",
    "SignInUseCase",
]
