"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from penpal.domain.model import Contact, Letter, UserAccount
from penpal.domain.value import AccountId, ContactId, LetterId


def row_to_user_account(row: Dict[str, Any]) -> UserAccount:
    """Convert database row to UserAccount domain model.

    Args:
        row: Database row as dict

    Returns:
        UserAccount domain model
    """
    return UserAccount(
        id=AccountId(row["id"]),
        email=row.get("email"),
        login_request_token=row.get("login_request_token"),
        bearer_token=row.get("bearer_token"),
        bearer_token_expires_at=row.get("bearer_token_expires_at"),
        bearer_token_pending=row.get("bearer_token_pending", False),
        remote_user_id=row.get("remote_user_id"),
        display_name=row.get("display_name"),
        photo_url=row.get("photo_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_account_to_dict(account: UserAccount) -> Dict[str, Any]:
    """Convert UserAccount domain model to database dict."""
    return account.model_dump()


def row_to_contact(row: Dict[str, Any]) -> Contact:
    """Convert database row to Contact domain model."""
    return Contact(
        id=ContactId(row["id"]),
        owner_id=AccountId(row["owner_id"]),
        display_name=row["display_name"],
        handle=row.get("handle"),
        photo_url=row.get("photo_url"),
        updated_at=row["updated_at"],
    )


def contact_to_dict(contact: Contact) -> Dict[str, Any]:
    """Convert Contact domain model to database dict."""
    return contact.model_dump()


def row_to_letter(row: Dict[str, Any]) -> Letter:
    """Convert database row to Letter domain model."""
    return Letter(
        id=LetterId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        sender_id=AccountId(row["sender_id"]),
        recipient_id=ContactId(row["recipient_id"]),
        description=row["description"],
        image_url=row["image_url"],
        file_type=row.get("file_type"),
        file_name=row.get("file_name"),
        thumbnail_url=row.get("thumbnail_url"),
        created_at=row["created_at"],
    )


def letter_to_dict(letter: Letter) -> Dict[str, Any]:
    """Convert Letter domain model to database dict."""
    return letter.model_dump()
