"""SQLAlchemy table definitions for Penpal.

These match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USER ACCOUNTS TABLE (one row per identity-provider account)
# ============================================================================
user_accounts_table = Table(
    "user_accounts",
    metadata,
    Column("id", String(128), primary_key=True),  # Assigned by identity provider
    Column("email", String(255), nullable=True),
    Column("login_request_token", Text, nullable=True),
    Column("bearer_token", Text, nullable=True),
    Column("bearer_token_expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column("bearer_token_pending", Boolean, nullable=False, server_default="false"),
    Column("remote_user_id", String(128), nullable=True),
    Column("display_name", String(255), nullable=True),
    Column("photo_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_user_accounts_remote_user_id", user_accounts_table.c.remote_user_id)

# ============================================================================
# CONTACTS TABLE (keyed by owner + remote contact id)
# ============================================================================
contacts_table = Table(
    "contacts",
    metadata,
    Column("id", String(128), nullable=False),  # MeWe user id or uuid4 hex
    Column(
        "owner_id",
        String(128),
        ForeignKey("user_accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("display_name", String(255), nullable=False),
    Column("handle", String(255), nullable=True),
    Column("photo_url", Text, nullable=True),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("owner_id", "id", name="pk_contacts"),
)

Index("idx_contacts_owner_id", contacts_table.c.owner_id)

# ============================================================================
# LETTERS TABLE
# ============================================================================
letters_table = Table(
    "letters",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "sender_id",
        String(128),
        ForeignKey("user_accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("recipient_id", String(128), nullable=False),
    Column("description", Text, nullable=False),
    Column("image_url", Text, nullable=False),
    Column("file_type", String(100), nullable=True),
    Column("file_name", String(255), nullable=True),
    Column("thumbnail_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_letters_sender_created", letters_table.c.sender_id, letters_table.c.created_at)
Index(
    "idx_letters_recipient_created",
    letters_table.c.recipient_id,
    letters_table.c.created_at,
)
