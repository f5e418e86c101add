"""
NoteDesk Backend — Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract of the notes resource.
How:   FastAPI validates request bodies against the request models,
       serializes responses through the response models, and generates
       OpenAPI docs from both.

Request fields are Optional on purpose: a missing or empty field is a
business-rule failure answered with 400 "All fields are required" by the
service, not a schema failure. Type errors (malformed UUID, non-boolean
`completed`) still fail schema validation and are mapped to 400 as well.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, StrictBool


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreateRequest(BaseModel):
    """Body of POST /notes."""
    user: Optional[uuid.UUID] = Field(default=None, description="Owning user's ID")
    title: Optional[str] = Field(default=None, max_length=255, description="Unique note title")
    text: Optional[str] = Field(default=None, description="Note body")


class NoteUpdateRequest(BaseModel):
    """
    Body of PATCH /notes.

    `completed` is StrictBool: "true", 1 and similar are rejected rather
    than coerced.
    """
    id: Optional[uuid.UUID] = Field(default=None, description="ID of the note to update")
    user: Optional[uuid.UUID] = Field(default=None, description="New owning user's ID")
    title: Optional[str] = Field(default=None, max_length=255, description="New title")
    text: Optional[str] = Field(default=None, description="New body")
    completed: Optional[StrictBool] = Field(default=None, description="New completed flag")


class NoteDeleteRequest(BaseModel):
    """Body of DELETE /notes."""
    id: Optional[uuid.UUID] = Field(default=None, description="ID of the note to delete")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteWithUsername(BaseModel):
    """
    What:  A note enriched with its owner's username.
    Who:   Array items of GET /notes.

    username is null when the owning user no longer exists.
    """
    id: uuid.UUID = Field(description="Unique note identifier")
    user: uuid.UUID = Field(description="Owning user's ID")
    title: str = Field(description="Note title")
    text: str = Field(description="Note body")
    completed: bool = Field(description="Completed flag")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last modification timestamp (UTC)")
    username: Optional[str] = Field(default=None, description="Owner's username")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Confirmation returned by create, update and delete."""
    message: str = Field(description="Human-readable outcome")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "conflict",
            "message": "Duplicate title",
            "request_id": "3f2a9c1e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
