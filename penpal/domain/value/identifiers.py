"""Strongly typed identifiers for Penpal domain entities.

Account and contact ids are opaque strings assigned by external systems
(the identity service and MeWe respectively); letters are ours.
"""

from typing import NewType
from uuid import UUID

# Assigned by the identity provider
AccountId = NewType("AccountId", str)

# Remote contact id for synced contacts, uuid4 hex for manual imports
ContactId = NewType("ContactId", str)

LetterId = NewType("LetterId", UUID)
