"""Collection entry model."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import CollectionStatus


class UserMedia(models.Model):
    """A user's tracking record for one catalog entry.

    A user can hold at most one record per entry; the database enforces it.
    """

    entry_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="collection",
        db_column="user_id",
    )
    media = models.ForeignKey(
        "core.Media",
        on_delete=models.CASCADE,
        related_name="collection_entries",
        db_column="media_id",
    )
    status = models.CharField(
        max_length=12,
        choices=[(s.value, s.value) for s in CollectionStatus],
        default=CollectionStatus.WISHLIST.value,
    )
    notes = models.TextField(blank=True, null=True)
    added_at = models.DateTimeField(auto_now_add=True)
    completed_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        """Django model metadata."""

        db_table = "user_media"
        ordering: ClassVar[list[str]] = ["-added_at"]
        constraints: ClassVar[list] = [
            models.UniqueConstraint(
                fields=["user", "media"], name="unique_user_media"
            ),
        ]

    def __str__(self) -> str:
        """Return string representation of the collection entry."""
        return f"{self.user_id} -> {self.media_id} ({self.status})"

    def __repr__(self) -> str:
        """Return detailed representation of the collection entry."""
        return (
            f"<UserMedia(entry_id={self.entry_id}, "
            f"user={self.user_id}, "
            f"media={self.media_id}, "
            f"status={self.status})>"
        )
