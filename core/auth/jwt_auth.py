"""Bearer token authentication for Django REST Framework.

Access tokens are HS256 JWTs signed with ``settings.JWT_SECRET`` and are
validated locally; the user row is loaded so that disabled or deleted
accounts lose access immediately.
"""

import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

from django.conf import settings

import jwt
import structlog
from rest_framework import authentication, exceptions

from core.models.user import User

logger = structlog.get_logger(__name__)

ACCESS_TOKEN_TYPE = "access_token"
JWT_ALGORITHM = "HS256"


class AuthenticatedUser:
    """Principal for a request authenticated with a bearer token.

    This is not a Django User model, just a container for the caller's
    identity and role.
    """

    def __init__(self, user_id: str, role: str):
        """Initialize the principal.

        Args:
            user_id: User ID from the token subject
            role: Role of the user (ADMIN or USER)
        """
        self.id = user_id
        self.user_id = user_id
        self.role = role
        self.is_authenticated = True

    def __str__(self):
        """String representation."""
        return f"AuthenticatedUser(user_id={self.user_id}, role={self.role})"


def issue_access_token(user: User) -> tuple[str, int]:
    """Create a signed access token for ``user``.

    Returns:
        Tuple of (token, lifetime in seconds)
    """
    ttl = int(settings.JWT_ACCESS_TOKEN_TTL_SECONDS)
    now = datetime.now(UTC)
    payload = {
        "sub": str(user.user_id),
        "role": user.role,
        "type": ACCESS_TOKEN_TYPE,
        "iat": now,
        "exp": now + timedelta(seconds=ttl),
    }
    token = jwt.encode(payload, settings.JWT_SECRET, algorithm=JWT_ALGORITHM)
    return token, ttl


class JWTAuthentication(authentication.BaseAuthentication):
    """Bearer token authentication.

    Extracts and validates Bearer tokens from the Authorization header.
    Requests without the header are left anonymous.
    """

    def authenticate(self, request):
        """Authenticate the request using a Bearer token.

        Args:
            request: Django request object

        Returns:
            Tuple of (user, token) or None if authentication not attempted

        Raises:
            AuthenticationFailed: If authentication fails
        """
        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise exceptions.AuthenticationFailed("Invalid authorization header format")

        token = parts[1]
        payload = self._decode(token)

        user_id = payload.get("sub")
        user = self._load_user(user_id)
        if user is None or user.disabled:
            logger.info("token_rejected_for_inactive_user", user_id=user_id)
            raise exceptions.AuthenticationFailed("Account is not active")

        return (AuthenticatedUser(user_id=str(user.user_id), role=user.role), token)

    def _load_user(self, user_id: Any) -> User | None:
        """Fetch the account named by the token subject, if it still exists."""
        try:
            return User.objects.filter(user_id=uuid.UUID(str(user_id))).first()
        except ValueError:
            return None

    def _decode(self, token: str) -> dict[str, Any]:
        """Validate the token signature, expiry and type.

        Args:
            token: JWT access token to validate

        Returns:
            Token claims

        Raises:
            AuthenticationFailed: If token is invalid
        """
        try:
            payload = jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("JWT token has expired")
            raise exceptions.AuthenticationFailed("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("Invalid JWT token", error=str(e))
            raise exceptions.AuthenticationFailed("Invalid token") from e

        token_type = payload.get("type")
        if token_type != ACCESS_TOKEN_TYPE:
            logger.warning("Invalid token type", token_type=token_type)
            raise exceptions.AuthenticationFailed(f"Invalid token type: {token_type}")
        return payload

    def authenticate_header(self, _request):
        """Return WWW-Authenticate header value for 401 responses."""
        return "Bearer"
