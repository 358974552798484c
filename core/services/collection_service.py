"""Service for personal collections."""

from uuid import UUID

from django.db import IntegrityError, transaction
from django.utils import timezone

import structlog

from core.auth.context import RequestContext
from core.enums import CollectionStatus
from core.exceptions import ConflictError, ForbiddenError, NotFoundError
from core.models import Media, User, UserMedia
from core.repositories import MediaRepository
from core.schemas.collection import (
    CollectionEntryResponse,
    CollectionListResponse,
    PublicCollectionResponse,
)
from core.schemas.user import UserSummary

logger = structlog.get_logger(__name__)

ALREADY_IN_COLLECTION = "Already in your collection"


def completed_at_for(status: str):
    """Return the ``completed_at`` value that goes with ``status``."""
    if status == CollectionStatus.COMPLETED.value:
        return timezone.now()
    return None


class CollectionService:
    """Each user's collection of catalog entries with a tracking status."""

    def list_collection(
        self, ctx: RequestContext, status: str | None = None
    ) -> CollectionListResponse:
        """List the caller's collection, most recently added first.

        Args:
            ctx: Request context of the caller.
            status: Optional collection status filter; unknown values are
                ignored.
        """
        user_id = ctx.require_authenticated()
        queryset = UserMedia.objects.select_related("media").filter(user_id=user_id)
        if status and status in CollectionStatus.__members__:
            queryset = queryset.filter(status=status)
        entries = list(queryset.order_by("-added_at"))
        return CollectionListResponse(
            entries=[CollectionEntryResponse.model_validate(e) for e in entries],
            total=len(entries),
        )

    def add(
        self,
        ctx: RequestContext,
        media_id: UUID | str,
        status: CollectionStatus = CollectionStatus.WISHLIST,
        notes: str | None = None,
    ) -> CollectionEntryResponse:
        """Add a catalog entry to the caller's collection.

        Raises:
            NotFoundError: If the entry does not exist or is hidden from the
                caller.
            ConflictError: If the entry is already in the collection.
        """
        user_id = ctx.require_authenticated()
        media = MediaRepository.get_visible(ctx, media_id)
        if media is None:
            raise NotFoundError("Media not found")

        entry = self.add_entry(user_id, media, CollectionStatus(status), notes)
        logger.info(
            "collection_entry_added",
            user_id=user_id,
            media_id=str(media.media_id),
            status=entry.status,
        )
        return CollectionEntryResponse.model_validate(entry)

    def add_entry(
        self,
        user_id: UUID | str,
        media: Media,
        status: CollectionStatus,
        notes: str | None = None,
    ) -> UserMedia:
        """Create the collection row, surfacing duplicates as a conflict."""
        if UserMedia.objects.filter(user_id=user_id, media=media).exists():
            raise ConflictError(ALREADY_IN_COLLECTION)
        try:
            with transaction.atomic():
                return UserMedia.objects.create(
                    user_id=user_id,
                    media=media,
                    status=status.value,
                    notes=notes,
                    completed_at=completed_at_for(status.value),
                )
        except IntegrityError as err:
            raise ConflictError(ALREADY_IN_COLLECTION) from err

    def update(
        self,
        ctx: RequestContext,
        entry_id: UUID | str,
        fields: dict,
    ) -> CollectionEntryResponse:
        """Change the status and/or notes of one of the caller's entries.

        Moving to COMPLETED stamps ``completed_at``; moving to any other
        status clears it.

        Args:
            ctx: Request context of the caller.
            entry_id: Collection entry to update.
            fields: Subset of ``status`` and ``notes`` to change.
        """
        entry = self._get_owned_entry(ctx, entry_id)
        update_fields = []
        if fields.get("status") is not None:
            status = CollectionStatus(fields["status"]).value
            entry.status = status
            entry.completed_at = completed_at_for(status)
            update_fields += ["status", "completed_at"]
        if "notes" in fields:
            entry.notes = fields["notes"]
            update_fields.append("notes")
        if update_fields:
            entry.save(update_fields=update_fields)
            logger.info(
                "collection_entry_updated",
                entry_id=str(entry.entry_id),
                status=entry.status,
            )
        return CollectionEntryResponse.model_validate(entry)

    def remove(self, ctx: RequestContext, entry_id: UUID | str) -> None:
        """Delete one of the caller's collection entries."""
        entry = self._get_owned_entry(ctx, entry_id)
        entry.delete()
        logger.info("collection_entry_removed", entry_id=str(entry_id))

    def public_collection(self, user_id: UUID | str) -> PublicCollectionResponse:
        """Return another user's collection if their profile is public.

        Raises:
            NotFoundError: If the user does not exist.
            ForbiddenError: If the profile is private.
        """
        user = User.objects.filter(user_id=user_id).first()
        if user is None:
            raise NotFoundError("User not found")
        if not user.profile_public:
            raise ForbiddenError("Collection is private")

        entries = list(
            UserMedia.objects.select_related("media")
            .filter(user=user)
            .order_by("-added_at")
        )
        return PublicCollectionResponse(
            user=UserSummary.model_validate(user),
            entries=[CollectionEntryResponse.model_validate(e) for e in entries],
            total=len(entries),
        )

    def _get_owned_entry(self, ctx: RequestContext, entry_id: UUID | str) -> UserMedia:
        user_id = ctx.require_authenticated()
        entry = (
            UserMedia.objects.select_related("media")
            .filter(entry_id=entry_id)
            .first()
        )
        if entry is None:
            raise NotFoundError("Not found")
        if not ctx.is_user(entry.user_id):
            logger.warning(
                "collection_entry_forbidden", entry_id=str(entry_id), user_id=user_id
            )
            raise ForbiddenError("Forbidden")
        return entry


# Singleton instance for use throughout the application
collection_service = CollectionService()
