"""User model."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import UserRole


class User(models.Model):
    """Account of a person using the media library.

    Credentials are stored as a Django password hash. Admins moderate
    catalog submissions and manage other (non-admin) accounts.
    """

    user_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    role = models.CharField(
        max_length=10,
        choices=[(role.value, role.value) for role in UserRole],
        default=UserRole.USER.value,
    )
    email = models.EmailField(max_length=255, unique=True)
    name = models.CharField(max_length=200, default="", blank=True)
    password_hash = models.CharField(max_length=255, default="", blank=True)
    image = models.URLField(max_length=500, blank=True, null=True)
    disabled = models.BooleanField(default=False)
    profile_public = models.BooleanField(
        default=False,
        help_text="Whether other users may browse this user's collection",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        ordering: ClassVar[list[str]] = ["-created_at"]

    @property
    def is_admin(self) -> bool:
        """Return True for admin accounts."""
        return self.role == UserRole.ADMIN.value

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.name or self.email} ({self.email})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(user_id={self.user_id}, email='{self.email}', role={self.role})>"
