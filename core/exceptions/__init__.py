"""Exception types and the API exception handler."""

from core.exceptions.domain_exceptions import (
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    LibraryError,
    NotFoundError,
    UnprocessableError,
)
from core.exceptions.downstream_exceptions import (
    DownstreamServiceError,
    DownstreamServiceUnavailableError,
    ServiceNotConfiguredError,
)
from core.exceptions.handlers import custom_exception_handler

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DownstreamServiceError",
    "DownstreamServiceUnavailableError",
    "ForbiddenError",
    "InvalidInputError",
    "LibraryError",
    "NotFoundError",
    "ServiceNotConfiguredError",
    "UnprocessableError",
    "custom_exception_handler",
]
