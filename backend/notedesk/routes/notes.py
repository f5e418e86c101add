"""
NoteDesk Backend — Notes Route Handlers
=========================================

What:  GET / POST / PATCH / DELETE on /notes.
How:   Parses the JSON body into a request model (an absent body is an empty
       model, so the service reports which fields are missing), delegates to
       NoteService, returns the typed response. Errors raised by the service
       are turned into JSON by the global exception handlers.

Route Inventory:
    GET    /notes   → 200 [NoteWithUsername]      | 400 no notes
    POST   /notes   → 201 {message}               | 400 | 409
    PATCH  /notes   → 200 {message}               | 400 | 409
    DELETE /notes   → 200 {message}               | 400
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notedesk.database import get_db_session, get_session_factory
from notedesk.schemas.note import (
    ErrorResponse,
    MessageResponse,
    NoteCreateRequest,
    NoteDeleteRequest,
    NoteUpdateRequest,
    NoteWithUsername,
)
from notedesk.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Notes"])

_bad_request = {400: {"description": "Missing fields or note not found", "model": ErrorResponse}}
_conflict = {409: {"description": "Duplicate title", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[NoteWithUsername],
    responses={
        400: {"description": "No notes found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all notes with owner usernames",
)
async def list_notes(
    db: AsyncSession = Depends(get_db_session),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> List[NoteWithUsername]:
    return await note_service.list_notes(db=db, session_factory=session_factory)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={**_bad_request, **_conflict},
    summary="Create a note",
    description="Creates a note for `user`. Titles are unique across all notes.",
)
async def create_note(
    payload: Optional[NoteCreateRequest] = None,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await note_service.create_note(db=db, payload=payload or NoteCreateRequest())


@router.patch(
    "",
    response_model=MessageResponse,
    responses={**_bad_request, **_conflict},
    summary="Update a note",
    description=(
        "Replaces user, title, text and completed on the note identified by `id`. "
        "All fields are required; `completed` must be a JSON boolean."
    ),
)
async def update_note(
    payload: Optional[NoteUpdateRequest] = None,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await note_service.update_note(db=db, payload=payload or NoteUpdateRequest())


@router.delete(
    "",
    response_model=MessageResponse,
    responses=_bad_request,
    summary="Delete a note",
)
async def delete_note(
    payload: Optional[NoteDeleteRequest] = None,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await note_service.delete_note(db=db, payload=payload or NoteDeleteRequest())
