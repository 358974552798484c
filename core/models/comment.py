"""Comment model."""

import uuid
from typing import ClassVar

from django.db import models


class Comment(models.Model):
    """A discussion comment left on a catalog entry."""

    comment_id = models.UUIDField(
        primary_key=True, default=uuid.uuid4, editable=False
    )
    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="comments",
        db_column="user_id",
    )
    media = models.ForeignKey(
        "core.Media",
        on_delete=models.CASCADE,
        related_name="comments",
        db_column="media_id",
    )
    body = models.TextField(max_length=2000)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "comments"
        ordering: ClassVar[list[str]] = ["created_at"]

    def __str__(self) -> str:
        """Return string representation of comment."""
        return f"Comment {self.comment_id} on {self.media_id}"
