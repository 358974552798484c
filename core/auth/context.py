"""Request-scoped security context passed explicitly into services."""

from dataclasses import dataclass
from typing import Any

from rest_framework.exceptions import NotAuthenticated

from core.enums.user_role import UserRole


@dataclass(frozen=True)
class RequestContext:
    """Who is calling, as established by authentication.

    Built once per request in the view layer and handed to every service
    operation; services never look at the request or at global state.
    """

    user_id: str | None = None
    role: str = UserRole.USER.value
    authenticated: bool = False

    @classmethod
    def anonymous(cls) -> "RequestContext":
        """Context for a caller without credentials."""
        return cls()

    @classmethod
    def for_user(cls, user_id: Any, role: str) -> "RequestContext":
        """Context for an authenticated user."""
        return cls(user_id=str(user_id), role=role, authenticated=True)

    @classmethod
    def from_request(cls, request: Any) -> "RequestContext":
        """Build the context from a DRF request's authenticated principal.

        Args:
            request: DRF request object.

        Returns:
            An authenticated context when a principal is present, otherwise
            an anonymous one.
        """
        principal = getattr(request, "user", None)
        if principal is None or not getattr(principal, "is_authenticated", False):
            return cls.anonymous()
        user_id = getattr(principal, "user_id", None)
        if user_id is None:
            return cls.anonymous()
        return cls.for_user(user_id, getattr(principal, "role", UserRole.USER.value))

    @property
    def is_admin(self) -> bool:
        """Whether the caller holds the admin role."""
        return self.authenticated and self.role == UserRole.ADMIN.value

    def require_authenticated(self) -> str:
        """Return the caller's user id.

        Raises:
            NotAuthenticated: If the caller is anonymous.
        """
        if not self.authenticated or self.user_id is None:
            raise NotAuthenticated("Authentication required")
        return self.user_id

    def is_user(self, user_id: Any) -> bool:
        """Whether ``user_id`` refers to the caller."""
        return self.authenticated and user_id is not None and str(user_id) == self.user_id
