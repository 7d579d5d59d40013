"""Contact use cases."""

from .import_contact import (
    ImportContactRequest,
    ImportContactResponse,
    ImportContactUseCase,
)
from .list_contacts import (
    ContactInfo,
    ListContactsRequest,
    ListContactsResponse,
    ListContactsUseCase,
)
from .sync_contacts import (
    SyncContactsRequest,
    SyncContactsResponse,
    SyncContactsUseCase,
)

__all__ = [
    "ContactInfo",
    "ImportContactRequest",
    "ImportContactResponse",
    "ImportContactUseCase",
    "ListContactsRequest",
    "ListContactsResponse",
    "ListContactsUseCase",
    "SyncContactsRequest",
    "SyncContactsResponse",
    "SyncContactsUseCase",
]
