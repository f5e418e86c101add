"""Create users and notes tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates `users` (read-only for this service) and `notes`.
How:   notes.title carries the uq_notes_title unique constraint; notes.user_id
       is indexed but has no foreign key, since users live in the account
       service's domain and may disappear independently of their notes.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    op.create_table(
        "notes",
        sa.Column("id", sa.Uuid(), nullable=False, comment="Unique note identifier"),
        sa.Column("user_id", sa.Uuid(), nullable=False, comment="Owning user's identifier"),
        sa.Column("title", sa.String(255), nullable=False, comment="Note title, unique across all notes"),
        sa.Column("text", sa.Text(), nullable=False, comment="Note body"),
        sa.Column(
            "completed",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
            comment="Whether the note has been marked done",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
            comment="When this note was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
            comment="When this note was last modified (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("title", name="uq_notes_title"),
    )

    op.create_index("ix_notes_user_id", "notes", ["user_id"])


def downgrade() -> None:
    """Drops both tables. Destructive: all note data is lost."""
    op.drop_index("ix_notes_user_id", table_name="notes")
    op.drop_table("notes")
    op.drop_table("users")
