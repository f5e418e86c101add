"""
NoteDesk Backend — Note SQLAlchemy Model
==========================================

What:  ORM model representing the `notes` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads it for migrations.
Who:   Used by the note repository for CRUD operations.

Table Design:
    - UUID primary key generated in Python (portable across PostgreSQL and SQLite)
    - user_id: owning user's UUID. Indexed, but deliberately NOT a foreign key:
      users are managed outside this service, and a note whose owner has been
      removed must still be listable (its username resolves to null).
    - title: unique across ALL notes, regardless of owner (uq_notes_title)
    - completed: boolean flag, false on creation
    - created_at / updated_at: UTC, timezone-aware
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, String, Text, UniqueConstraint, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column

from notedesk.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A title/text/completed record owned by a user.

    Lifecycle:
        1. Created by POST /notes after the duplicate-title check
        2. Mutated in place by PATCH /notes (user, title, text, completed)
        3. Removed permanently by DELETE /notes
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique note identifier",
    )

    # Attribute is `user` to match the API field; column is user_id because
    # "user" is a reserved word in PostgreSQL.
    user: Mapped[uuid.UUID] = mapped_column(
        "user_id",
        Uuid,
        nullable=False,
        index=True,
        comment="Owning user's identifier",
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Note title, unique across all notes",
    )

    text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note body",
    )

    completed: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
        comment="Whether the note has been marked done",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        comment="When this note was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        comment="When this note was last modified (UTC)",
    )

    # The pre-check in the service gives the friendly 409; this constraint
    # closes the window between that read and the write.
    __table_args__ = (
        UniqueConstraint("title", name="uq_notes_title"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}', completed={self.completed})>"
