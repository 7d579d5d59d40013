"""MeWe account link use cases."""

from .connect_account import (
    ConnectAccountRequest,
    ConnectAccountResponse,
    ConnectAccountUseCase,
)
from .exchange_token import (
    ExchangeTokenRequest,
    ExchangeTokenResponse,
    ExchangeTokenUseCase,
)
from .request_link import RequestLinkRequest, RequestLinkResponse, RequestLinkUseCase

__all__ = [
    "ConnectAccountRequest",
    "ConnectAccountResponse",
    "ConnectAccountUseCase",
    "ExchangeTokenRequest",
    "ExchangeTokenResponse",
    "ExchangeTokenUseCase",
    "RequestLinkRequest",
    "RequestLinkResponse",
    "RequestLinkUseCase",
]
