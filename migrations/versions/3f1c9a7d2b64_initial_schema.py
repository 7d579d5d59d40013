"""initial_schema

Create the Penpal schema:
- User accounts (identity-provider id, MeWe link tokens, MeWe profile)
- Contacts (per-owner snapshot of the MeWe followed list)
- Letters (object store URL + description addressed to a contact)

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-18 09:12:44.318207

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USER_ACCOUNTS table
    # ========================================================================
    op.create_table(
        "user_accounts",
        sa.Column("id", sa.String(128), nullable=False),  # Identity provider uid
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("login_request_token", sa.Text(), nullable=True),
        sa.Column("bearer_token", sa.Text(), nullable=True),
        sa.Column("bearer_token_expires_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "bearer_token_pending",
            sa.Boolean(),
            nullable=False,
            server_default="false",
        ),
        sa.Column("remote_user_id", sa.String(128), nullable=True),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("photo_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "bearer_token IS NULL OR bearer_token_expires_at IS NOT NULL",
            name="ck_user_accounts_bearer_token_expiry",
        ),
    )
    op.create_index(
        "idx_user_accounts_remote_user_id", "user_accounts", ["remote_user_id"]
    )

    # ========================================================================
    # CONTACTS table
    # ========================================================================
    op.create_table(
        "contacts",
        sa.Column("id", sa.String(128), nullable=False),  # MeWe user id or uuid4 hex
        sa.Column("owner_id", sa.String(128), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("handle", sa.String(255), nullable=True),
        sa.Column("photo_url", sa.Text(), nullable=True),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["owner_id"], ["user_accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("owner_id", "id", name="pk_contacts"),
    )
    op.create_index("idx_contacts_owner_id", "contacts", ["owner_id"])

    # ========================================================================
    # LETTERS table
    # ========================================================================
    op.create_table(
        "letters",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("sender_id", sa.String(128), nullable=False),
        sa.Column("recipient_id", sa.String(128), nullable=False),  # MeWe user id
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("file_type", sa.String(100), nullable=True),
        sa.Column("file_name", sa.String(255), nullable=True),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["sender_id"], ["user_accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(description) BETWEEN 1 AND 2000",
            name="ck_letters_description_length",
        ),
    )
    op.create_index(
        "idx_letters_sender_created", "letters", ["sender_id", "created_at"]
    )
    op.create_index(
        "idx_letters_recipient_created", "letters", ["recipient_id", "created_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_letters_recipient_created", table_name="letters")
    op.drop_index("idx_letters_sender_created", table_name="letters")
    op.drop_table("letters")

    op.drop_index("idx_contacts_owner_id", table_name="contacts")
    op.drop_table("contacts")

    op.drop_index("idx_user_accounts_remote_user_id", table_name="user_accounts")
    op.drop_table("user_accounts")
