"""
NoteDesk Backend — User SQLAlchemy Model
==========================================

What:  ORM mapping of the `users` table.
Who:   Read by the user repository to resolve a note owner's username.

Users are created and managed by the account service; this backend only
reads `id` and `username`.
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from notedesk.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    username: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
