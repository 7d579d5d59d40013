"""Domain services."""

from .account_service import AccountService
from .base import Service
from .contact_sync_service import ContactSyncService
from .jwt_service import JWTService
from .letter_service import LetterService
from .link_service import (
    AccountLinkService,
    ConnectResult,
    RemoteAccountClient,
    TokenExchangeResult,
)

__all__ = [
    "AccountLinkService",
    "AccountService",
    "ConnectResult",
    "ContactSyncService",
    "JWTService",
    "LetterService",
    "RemoteAccountClient",
    "Service",
    "TokenExchangeResult",
]
