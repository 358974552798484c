"""Catalog entry model."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import MediaType, SubmissionStatus


class Media(models.Model):
    """One work in the catalog (a movie, an album or a game).

    Entries created by regular users start PENDING and go through admin
    moderation; only APPROVED entries appear in the public catalog.
    ``created_by`` is null for seeded rows and for entries whose submitter
    has been deleted.
    """

    media_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    media_type = models.CharField(
        max_length=10,
        choices=[(t.value, t.value) for t in MediaType],
    )
    title = models.CharField(max_length=255, db_index=True)
    creator = models.CharField(max_length=255)
    genre = models.CharField(max_length=100, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    cover_url = models.URLField(max_length=500, blank=True, null=True)
    release_date = models.DateField(blank=True, null=True)
    metadata = models.TextField(
        blank=True,
        null=True,
        help_text="Free-form extra details (platform, tracklist, runtime...)",
    )
    status = models.CharField(
        max_length=10,
        choices=[(s.value, s.value) for s in SubmissionStatus],
        default=SubmissionStatus.PENDING.value,
        db_index=True,
    )
    rejection_note = models.TextField(blank=True, null=True)
    created_by = models.ForeignKey(
        "core.User",
        on_delete=models.SET_NULL,
        related_name="submissions",
        db_column="created_by_id",
        blank=True,
        null=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "media"
        verbose_name_plural = "media"
        ordering: ClassVar[list[str]] = ["title"]
        indexes: ClassVar[list] = [
            models.Index(fields=["status", "-created_at"]),
            models.Index(fields=["created_by", "-created_at"]),
        ]

    @property
    def is_approved(self) -> bool:
        """Return True once the entry is part of the public catalog."""
        return self.status == SubmissionStatus.APPROVED.value

    def __str__(self) -> str:
        """Return string representation of the entry."""
        return f"{self.title} by {self.creator} ({self.media_type})"

    def __repr__(self) -> str:
        """Return detailed representation of the entry."""
        return (
            f"<Media(media_id={self.media_id}, "
            f"title='{self.title}', "
            f"status={self.status})>"
        )
