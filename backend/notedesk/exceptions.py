"""
NoteDesk Backend — Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the error scenarios of the notes API.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) catch these
       and return structured JSON error responses with the right status code.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    NoteDeskError (base)
    ├── ValidationError   → 400 Bad Request (missing/empty fields, rejected data)
    ├── NotFoundError     → 400 Bad Request (note does not exist)
    ├── ConflictError     → 409 Conflict (duplicate title)
    └── DatabaseError     → 500 Internal Server Error

NotFoundError maps to 400, not 404; the status code is part of the
existing API contract.
"""

from typing import Any, Dict, Optional


class NoteDeskError(Exception):
    """
    Base exception for all NoteDesk application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteDeskError):
    """
    Raised when client input fails validation.

    When:    Required fields missing or empty, or the store rejects the data.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "All fields are required",
            "details": {"missing": ["title"]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NoteDeskError):
    """
    Raised when a requested resource does not exist.

    When:    No notes at all on list; unknown note id on update/delete.
    HTTP:    400 Bad Request

    SQLAlchemy returns None for missing rows; the service layer converts
    that None into this exception.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(NoteDeskError):
    """
    Raised when a write would violate title uniqueness.

    When:    The duplicate-title pre-check finds another note, or the
             uq_notes_title constraint fires on flush.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "A note with that title already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(NoteDeskError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, deadlock, driver error.
    HTTP:    500 Internal Server Error

    The client always receives a generic message; details (statement,
    driver error) are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
