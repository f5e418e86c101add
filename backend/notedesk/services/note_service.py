"""
NoteDesk Backend — Note Service (Business Logic)
==================================================

What:  The logic behind the four notes endpoints: list, create, update, delete.
How:   Validates input, enforces title uniqueness, calls the repository
       accessors, and returns typed responses. Failures are raised as
       application exceptions and turned into HTTP responses by the global
       handlers in main.py.
Who:   Called by route handlers in routes/notes.py.

Each operation is a linear sequence with early exits:

    validate ──▶ read ──▶ check ──▶ mutate ──▶ respond
       │          │         │         │
      400        400       409     409 / 400 / 500

Title uniqueness is checked twice: a read before the write (friendly 409)
and the uq_notes_title constraint on flush. Two concurrent requests can both
pass the read; only one survives the constraint, and the other gets the same
409 instead of creating a duplicate.
"""

import asyncio
import logging
import uuid
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notedesk.exceptions import ConflictError, DatabaseError, NotFoundError, ValidationError
from notedesk.repositories import note_repository as note_repo
from notedesk.repositories import user_repository as user_repo
from notedesk.schemas.note import (
    MessageResponse,
    NoteCreateRequest,
    NoteDeleteRequest,
    NoteUpdateRequest,
    NoteWithUsername,
)

logger = logging.getLogger(__name__)

ALL_FIELDS_REQUIRED = "All fields are required"
NOTE_NOT_FOUND = "Note not found"


class NoteService:
    """
    Business logic layer for note operations.

    Stateless: every call receives the request's AsyncSession. The list
    operation also receives the session factory so it can fan out username
    lookups on independent sessions.
    """

    async def list_notes(
        self,
        db: AsyncSession,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> List[NoteWithUsername]:
        """
        Return every note enriched with its owner's username.

        The request session is committed once the notes are loaded, which
        returns its connection to the pool. Lookups for the distinct owners
        then run concurrently, one session each, and are recombined in the
        order the store returned the notes. An owner that no longer exists
        yields username=None.

        Raises:
            NotFoundError: The store holds no notes (→ 400)
        """
        notes = await note_repo.find_all(db)
        if not notes:
            raise NotFoundError(message="No notes found", resource="note")

        # Release the request connection; the lookups check out their own
        await db.commit()

        owner_ids = list(dict.fromkeys(note.user for note in notes))
        usernames = await asyncio.gather(
            *(self._resolve_username(session_factory, owner_id) for owner_id in owner_ids)
        )
        username_by_owner: Dict[uuid.UUID, Optional[str]] = dict(zip(owner_ids, usernames))

        return [
            NoteWithUsername(
                id=note.id,
                user=note.user,
                title=note.title,
                text=note.text,
                completed=note.completed,
                created_at=note.created_at,
                updated_at=note.updated_at,
                username=username_by_owner[note.user],
            )
            for note in notes
        ]

    async def _resolve_username(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        user_id: uuid.UUID,
    ) -> Optional[str]:
        async with session_factory() as session:
            username = await user_repo.find_username(session, user_id)
        if username is None:
            logger.warning("Note owner %s does not resolve to a user", user_id)
        return username

    async def create_note(self, db: AsyncSession, payload: NoteCreateRequest) -> MessageResponse:
        """
        Create a note after the duplicate-title check.

        Raises:
            ValidationError: A field is missing or empty, or the store
                             rejected the data (→ 400)
            ConflictError:   Another note already has this title (→ 409)
            DatabaseError:   Unexpected store failure (→ 500)
        """
        if not payload.user or not payload.title or not payload.text:
            raise ValidationError(message=ALL_FIELDS_REQUIRED)

        if await note_repo.find_by_title(db, payload.title):
            raise ConflictError(
                message="A note with that title already exists",
                context={"title": payload.title},
            )

        try:
            note = await note_repo.create(
                db, user=payload.user, title=payload.title, text=payload.text
            )
        except IntegrityError as e:
            await db.rollback()
            if await note_repo.find_by_title(db, payload.title):
                logger.info("Concurrent create lost the race for title %r", payload.title)
                raise ConflictError(
                    message="A note with that title already exists",
                    context={"title": payload.title},
                )
            logger.warning("Note insert rejected: %s", type(e.orig).__name__)
            raise ValidationError(message="Invalid note data received")
        except SQLAlchemyError as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        logger.info("Note %s created with title %r", note.id, note.title)
        return MessageResponse(message=f"A note with title {payload.title} has been created")

    async def update_note(self, db: AsyncSession, payload: NoteUpdateRequest) -> MessageResponse:
        """
        Overwrite user, title, text and completed on an existing note.

        Keeping the note's own title is allowed; taking another note's title
        is a conflict.

        Raises:
            ValidationError: A field is missing or completed is not a boolean (→ 400)
            NotFoundError:   No note with this id (→ 400)
            ConflictError:   A different note holds the title (→ 409)
            DatabaseError:   Unexpected store failure (→ 500)
        """
        if (
            not payload.id
            or not payload.user
            or not payload.title
            or not payload.text
            or not isinstance(payload.completed, bool)
        ):
            raise ValidationError(message=ALL_FIELDS_REQUIRED)

        note = await note_repo.find_by_id(db, payload.id)
        if note is None:
            raise NotFoundError(message=NOTE_NOT_FOUND, resource="note", resource_id=str(payload.id))

        duplicate = await note_repo.find_by_title(db, payload.title)
        if duplicate is not None and duplicate.id != note.id:
            raise ConflictError(
                message="Duplicate title",
                context={"title": payload.title, "held_by": str(duplicate.id)},
            )

        note.user = payload.user
        note.title = payload.title
        note.text = payload.text
        note.completed = payload.completed

        try:
            await note_repo.save(db, note)
        except IntegrityError:
            # Rolling back discards the in-memory edits along with the flush
            await db.rollback()
            raise ConflictError(message="Duplicate title", context={"title": payload.title})
        except SQLAlchemyError as e:
            logger.error("Database error updating note %s: %s", payload.id, str(e), exc_info=True)
            raise DatabaseError(context={"note_id": str(payload.id)})

        logger.info("Note %s updated", note.id)
        return MessageResponse(message=f"Note with title {payload.title} updated")

    async def delete_note(self, db: AsyncSession, payload: NoteDeleteRequest) -> MessageResponse:
        """
        Permanently delete a note.

        Raises:
            ValidationError: No id supplied (→ 400)
            NotFoundError:   No note with this id (→ 400)
        """
        if not payload.id:
            raise ValidationError(message="Note ID required", field="id")

        note = await note_repo.find_by_id(db, payload.id)
        if note is None:
            raise NotFoundError(message=NOTE_NOT_FOUND, resource="note", resource_id=str(payload.id))

        title, note_id = note.title, note.id
        try:
            await note_repo.delete(db, note)
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(context={"note_id": str(note_id)})

        logger.info("Note %s deleted", note_id)
        return MessageResponse(message=f"Note with title {title} and ID {note_id} deleted")


note_service = NoteService()
