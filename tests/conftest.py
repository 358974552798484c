"""Pytest configuration and shared fixtures."""

from django.test import Client

import pytest

from tests.base import auth_header
from tests.factories import UserFactory


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture
def user(db):
    """A regular user."""
    return UserFactory.create()


@pytest.fixture
def admin_user(db):
    """An admin user."""
    return UserFactory.create_admin()


@pytest.fixture
def authenticated_client(user):
    """Test client sending a bearer token for ``user``."""
    return Client(**auth_header(user))
