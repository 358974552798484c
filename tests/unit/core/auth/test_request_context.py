"""Unit tests for RequestContext."""

import unittest
from types import SimpleNamespace
from uuid import uuid4

from rest_framework.exceptions import NotAuthenticated

from core.auth import AuthenticatedUser, RequestContext
from core.enums import UserRole


class TestRequestContext(unittest.TestCase):
    """Test cases for building and querying the request context."""

    def test_anonymous_context(self):
        """Anonymous callers are not authenticated and not admin."""
        ctx = RequestContext.anonymous()
        self.assertFalse(ctx.authenticated)
        self.assertFalse(ctx.is_admin)
        self.assertIsNone(ctx.user_id)

    def test_require_authenticated_raises_for_anonymous(self):
        """Anonymous callers get NotAuthenticated."""
        with self.assertRaises(NotAuthenticated):
            RequestContext.anonymous().require_authenticated()

    def test_for_user_stringifies_id(self):
        """User ids are stored as strings."""
        user_id = uuid4()
        ctx = RequestContext.for_user(user_id, UserRole.USER.value)
        self.assertEqual(ctx.require_authenticated(), str(user_id))
        self.assertTrue(ctx.is_user(user_id))
        self.assertTrue(ctx.is_user(str(user_id)))
        self.assertFalse(ctx.is_user(uuid4()))
        self.assertFalse(ctx.is_user(None))

    def test_admin_role(self):
        """The admin role is recognised."""
        ctx = RequestContext.for_user(uuid4(), UserRole.ADMIN.value)
        self.assertTrue(ctx.is_admin)

    def test_from_request_with_principal(self):
        """An authenticated principal becomes an authenticated context."""
        user_id = str(uuid4())
        request = SimpleNamespace(
            user=AuthenticatedUser(user_id=user_id, role=UserRole.ADMIN.value)
        )
        ctx = RequestContext.from_request(request)
        self.assertEqual(ctx.user_id, user_id)
        self.assertTrue(ctx.is_admin)

    def test_from_request_without_principal(self):
        """No user on the request means anonymous."""
        self.assertFalse(
            RequestContext.from_request(SimpleNamespace(user=None)).authenticated
        )

    def test_context_is_immutable(self):
        """The context cannot be modified after creation."""
        ctx = RequestContext.for_user(uuid4(), UserRole.USER.value)
        with self.assertRaises(AttributeError):
            ctx.role = UserRole.ADMIN.value  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
