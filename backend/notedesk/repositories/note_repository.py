"""Queries against the `notes` table.

Thin async wrappers over SQLAlchemy; no business rules live here. Writes
only flush, the request session commits.
"""
import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notedesk.models.note import Note


async def find_all(db: AsyncSession) -> List[Note]:
    """All notes in the store's natural order."""
    result = await db.execute(select(Note))
    return list(result.scalars().all())


async def find_by_id(db: AsyncSession, note_id: uuid.UUID) -> Optional[Note]:
    result = await db.execute(select(Note).where(Note.id == note_id))
    return result.scalar_one_or_none()


async def find_by_title(db: AsyncSession, title: str) -> Optional[Note]:
    """Store-wide title lookup, ignoring ownership."""
    result = await db.execute(select(Note).where(Note.title == title).limit(1))
    return result.scalar_one_or_none()


async def create(db: AsyncSession, user: uuid.UUID, title: str, text: str) -> Note:
    """Inserts a note and flushes so the id is assigned and constraints run."""
    note = Note(user=user, title=title, text=text)
    db.add(note)
    await db.flush()
    return note


async def save(db: AsyncSession, note: Note) -> Note:
    await db.flush()
    return note


async def delete(db: AsyncSession, note: Note) -> None:
    await db.delete(note)
    await db.flush()
