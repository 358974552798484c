"""Base test classes for different test types."""

import json

from django.test import Client, TestCase

from core.auth import RequestContext, issue_access_token

API_PREFIX = "/api/v1/library"


def auth_header(user) -> dict[str, str]:
    """Client kwargs carrying a bearer token for ``user``."""
    token, _ = issue_access_token(user)
    return {"HTTP_AUTHORIZATION": f"Bearer {token}"}


def ctx_for(user) -> RequestContext:
    """Request context for ``user`` as authentication would build it."""
    return RequestContext.for_user(user.user_id, user.role)


class BaseUnitTest(TestCase):
    """Base class for unit tests.

    Runs against the SQLite in-memory database with each test wrapped in a
    transaction.
    """


class BaseComponentTest(TestCase):
    """Base class for component tests.

    Drives the full request/response cycle through the Django test client.
    Third-party HTTP calls must be patched by the test.
    """

    def setUp(self):
        """Set up an anonymous client."""
        self.client = Client()

    def url(self, path: str) -> str:
        """Absolute API path for ``path``."""
        return f"{API_PREFIX}/{path.lstrip('/')}"

    def get_as(self, user, path, data=None):
        """GET ``path`` authenticated as ``user`` (anonymous when None)."""
        headers = auth_header(user) if user is not None else {}
        return self.client.get(self.url(path), data or {}, **headers)

    def send_as(self, method: str, user, path: str, body=None):
        """Send a JSON body with ``method`` authenticated as ``user``."""
        headers = auth_header(user) if user is not None else {}
        sender = getattr(self.client, method.lower())
        return sender(
            self.url(path),
            data=json.dumps(body) if body is not None else "",
            content_type="application/json",
            **headers,
        )
