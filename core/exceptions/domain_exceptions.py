"""Exceptions raised by the service layer.

Each exception carries the HTTP status it is surfaced with; the DRF
exception handler turns it into an ``{"error": ..., "details": ...}`` body.
"""

from typing import Any


class LibraryError(Exception):
    """Base class for errors reported directly to the API caller."""

    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: str | None = None, details: Any = None):
        """Initialize the error.

        Args:
            message: Human-readable message returned as ``error``.
            details: Optional structured data returned as ``details``.
        """
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class InvalidInputError(LibraryError):
    """Malformed body, bad query parameter or out-of-range value (400)."""

    status_code = 400
    default_message = "Invalid input"


class AuthenticationError(LibraryError):
    """Credentials were missing or did not match an active account (401)."""

    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(LibraryError):
    """Caller is authenticated but lacks the role or ownership required (403)."""

    status_code = 403
    default_message = "Forbidden"


class NotFoundError(LibraryError):
    """Referenced entity does not exist or is hidden from the caller (404)."""

    status_code = 404
    default_message = "Not found"


class ConflictError(LibraryError):
    """Operation clashes with existing state: duplicates, repeated reviews (409)."""

    status_code = 409
    default_message = "Conflict"


class UnprocessableError(LibraryError):
    """Input was well-formed but produced no usable result (422)."""

    status_code = 422
    default_message = "Unprocessable request"
