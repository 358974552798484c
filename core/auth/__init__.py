"""Authentication and request context."""

from core.auth.context import RequestContext
from core.auth.jwt_auth import AuthenticatedUser, JWTAuthentication, issue_access_token

__all__ = [
    "AuthenticatedUser",
    "JWTAuthentication",
    "RequestContext",
    "issue_access_token",
]
