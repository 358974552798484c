"""Review model."""

import uuid
from typing import ClassVar

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Review(models.Model):
    """A user's 1-5 star rating of a catalog entry, with optional text."""

    review_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="reviews",
        db_column="user_id",
    )
    media = models.ForeignKey(
        "core.Media",
        on_delete=models.CASCADE,
        related_name="reviews",
        db_column="media_id",
    )
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    body = models.TextField(max_length=2000, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "reviews"
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of review."""
        return f"Review {self.review_id}: {self.rating} stars for {self.media_id}"

    def __repr__(self) -> str:
        """Return detailed representation of review."""
        return (
            f"<Review(review_id={self.review_id}, "
            f"media_id={self.media_id}, "
            f"user_id={self.user_id}, "
            f"rating={self.rating})>"
        )
