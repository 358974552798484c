"""Service for the catalog and its moderation workflow.

Catalog entries submitted by regular users start PENDING and are either
approved into the public catalog or rejected by an admin. The review is
the only transition out of PENDING and it happens exactly once; the
submitter is notified of the outcome.
"""

from typing import Any
from uuid import UUID

from django.db import transaction
from django.db.models import Q
from django.utils import timezone

import structlog
from pydantic import ValidationError

from core.auth.context import RequestContext
from core.enums import (
    CollectionStatus,
    MediaType,
    NotificationType,
    ReviewAction,
    SubmissionStatus,
)
from core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
)
from core.models import Media
from core.repositories import MediaRepository
from core.schemas.media import (
    MediaCreateRequest,
    MediaListResponse,
    MediaResponse,
    PendingSubmissionListResponse,
    PendingSubmissionResponse,
    SubmissionReviewRequest,
)
from core.services.collection_service import collection_service
from core.services.notification_service import notification_service

logger = structlog.get_logger(__name__)

# Fields a submitter or admin may change through edit_submission
EDITABLE_FIELDS = (
    "media_type",
    "title",
    "creator",
    "genre",
    "description",
    "cover_url",
    "release_date",
    "metadata",
)
REQUIRED_FIELDS = ("media_type", "title", "creator")


class CatalogService:
    """Service for catalog entries and submission moderation."""

    def create_submission(
        self, ctx: RequestContext, request: MediaCreateRequest
    ) -> MediaResponse:
        """Create a catalog entry.

        Entries created by admins are approved immediately; everyone else's
        are PENDING until reviewed. No notification is sent on creation.

        Args:
            ctx: Request context of the caller.
            request: Validated submission.

        Returns:
            The created entry.
        """
        user_id = ctx.require_authenticated()
        status = (
            SubmissionStatus.APPROVED if ctx.is_admin else SubmissionStatus.PENDING
        )

        with transaction.atomic():
            media = Media.objects.create(
                media_type=MediaType(request.media_type).value,
                title=request.title,
                creator=request.creator,
                genre=request.genre,
                description=request.description,
                cover_url=request.cover_url,
                release_date=request.release_date,
                metadata=request.metadata,
                status=status.value,
                created_by_id=user_id,
            )
            if request.add_to_collection:
                collection_service.add_entry(
                    user_id, media, CollectionStatus(request.initial_status)
                )

        logger.info(
            "submission_created",
            media_id=str(media.media_id),
            user_id=user_id,
            status=media.status,
            added_to_collection=request.add_to_collection,
        )
        return MediaResponse.model_validate(media)

    def review_submission(
        self,
        ctx: RequestContext,
        media_id: UUID | str,
        action: Any,
        rejection_note: Any = None,
    ) -> MediaResponse:
        """Approve or reject a pending submission.

        Only PENDING entries can be reviewed; a second review of the same
        entry is a conflict and sends nothing. When the entry has a
        submitter other than the reviewing admin, exactly one
        MEDIA_APPROVED/MEDIA_REJECTED notification is sent to them.

        The notification is best effort: the status change is committed
        first and a failure to notify is logged, not raised.

        Args:
            ctx: Request context of the caller.
            media_id: Entry to review.
            action: ``approve`` or ``reject``.
            rejection_note: Optional note stored on reject, cleared on approve.

        Raises:
            ForbiddenError: If the caller is not an admin.
            NotFoundError: If the entry does not exist.
            InvalidInputError: If the action or note is malformed.
            ConflictError: If the entry has already been reviewed.
        """
        admin_id = ctx.require_authenticated()
        if not ctx.is_admin:
            logger.warning(
                "submission_review_forbidden",
                media_id=str(media_id),
                user_id=admin_id,
            )
            raise ForbiddenError("Forbidden")

        media = Media.objects.filter(media_id=media_id).first()
        if media is None:
            raise NotFoundError("Not found")

        try:
            review = SubmissionReviewRequest(
                action=action, rejection_note=rejection_note
            )
        except ValidationError as e:
            raise InvalidInputError(
                "Invalid input",
                details=e.errors(include_url=False, include_context=False),
            ) from e

        if media.status != SubmissionStatus.PENDING.value:
            logger.info(
                "submission_already_reviewed",
                media_id=str(media.media_id),
                status=media.status,
            )
            raise ConflictError(
                f"Submission has already been {media.status.lower()}"
            )

        approved = ReviewAction(review.action) is ReviewAction.APPROVE
        new_status = (
            SubmissionStatus.APPROVED.value
            if approved
            else SubmissionStatus.REJECTED.value
        )
        # Only a row that is still PENDING is updated
        updated = Media.objects.filter(
            media_id=media.media_id, status=SubmissionStatus.PENDING.value
        ).update(
            status=new_status,
            rejection_note=None if approved else review.rejection_note,
            updated_at=timezone.now(),
        )
        if updated == 0:
            current = Media.objects.filter(media_id=media.media_id).first()
            if current is None:
                raise NotFoundError("Not found")
            logger.info(
                "submission_review_lost_race",
                media_id=str(media.media_id),
                status=current.status,
            )
            raise ConflictError(
                f"Submission has already been {current.status.lower()}"
            )
        media.refresh_from_db()

        logger.info(
            "submission_reviewed",
            media_id=str(media.media_id),
            admin_id=admin_id,
            status=media.status,
        )

        if media.created_by_id is not None and not ctx.is_user(media.created_by_id):
            self._notify_submitter(media, admin_id, approved)

        return MediaResponse.model_validate(media)

    def edit_submission(
        self, ctx: RequestContext, media_id: UUID | str, fields: dict[str, Any]
    ) -> MediaResponse:
        """Edit the descriptive fields of an entry.

        Admins may edit any entry; submitters only their own PENDING ones.
        Moderation state is never changed here.

        Args:
            ctx: Request context of the caller.
            media_id: Entry to edit.
            fields: Changed fields, keyed by ``EDITABLE_FIELDS`` names.
        """
        user_id = ctx.require_authenticated()
        media = MediaRepository.get_visible(ctx, media_id)
        if media is None:
            raise NotFoundError("Not found")
        is_owner = ctx.is_user(media.created_by_id)
        if not ctx.is_admin and not (
            is_owner and media.status == SubmissionStatus.PENDING.value
        ):
            raise ForbiddenError("Forbidden")

        changed = []
        for name in EDITABLE_FIELDS:
            if name not in fields:
                continue
            value = fields[name]
            if value is None and name in REQUIRED_FIELDS:
                continue
            setattr(media, name, value)
            changed.append(name)

        if changed:
            media.save(update_fields=[*changed, "updated_at"])
            logger.info(
                "submission_edited",
                media_id=str(media.media_id),
                user_id=user_id,
                fields=changed,
            )
        return MediaResponse.model_validate(media)

    def delete_submission(self, ctx: RequestContext, media_id: UUID | str) -> None:
        """Delete an entry.

        Admins may delete anything; submitters only their own entries that
        are not APPROVED.
        """
        user_id = ctx.require_authenticated()
        media = MediaRepository.get_visible(ctx, media_id)
        if media is None:
            raise NotFoundError("Not found")
        is_owner = ctx.is_user(media.created_by_id)
        if not ctx.is_admin and not (
            is_owner and media.status != SubmissionStatus.APPROVED.value
        ):
            raise ForbiddenError("Forbidden")

        media.delete()
        logger.info("submission_deleted", media_id=str(media_id), user_id=user_id)

    def list_catalog(
        self,
        q: str | None = None,
        genre: str | None = None,
        media_type: str | None = None,
    ) -> MediaListResponse:
        """List the public catalog ordered by title.

        Args:
            q: Case-insensitive match on title, creator or description.
            genre: Exact genre filter.
            media_type: MOVIE, MUSIC or GAME; other values are ignored.
        """
        queryset = MediaRepository.approved()
        q = (q or "").strip()
        if q:
            queryset = queryset.filter(
                Q(title__icontains=q)
                | Q(creator__icontains=q)
                | Q(description__icontains=q)
            )
        if genre:
            queryset = queryset.filter(genre=genre)
        if media_type and media_type in MediaType.__members__:
            queryset = queryset.filter(media_type=media_type)

        entries = list(queryset.order_by("title"))
        return MediaListResponse(
            media=[MediaResponse.model_validate(m) for m in entries],
            total=len(entries),
        )

    def get_entry(self, ctx: RequestContext, media_id: UUID | str) -> MediaResponse:
        """Return an entry the caller is allowed to see.

        Hidden entries are reported as missing so their existence does not
        leak.
        """
        media = MediaRepository.get_visible(ctx, media_id)
        if media is None:
            raise NotFoundError("Not found")
        return MediaResponse.model_validate(media)

    def list_my_submissions(self, ctx: RequestContext) -> MediaListResponse:
        """The caller's own submissions in any status, newest first."""
        user_id = ctx.require_authenticated()
        entries = list(
            Media.objects.filter(created_by_id=user_id).order_by("-created_at")
        )
        return MediaListResponse(
            media=[MediaResponse.model_validate(m) for m in entries],
            total=len(entries),
        )

    def list_pending(self, ctx: RequestContext) -> PendingSubmissionListResponse:
        """The moderation queue, newest first. Admin only."""
        ctx.require_authenticated()
        if not ctx.is_admin:
            raise ForbiddenError("Forbidden")
        entries = list(
            Media.objects.select_related("created_by")
            .filter(status=SubmissionStatus.PENDING.value)
            .order_by("-created_at")
        )
        return PendingSubmissionListResponse(
            submissions=[PendingSubmissionResponse.model_validate(m) for m in entries],
            total=len(entries),
        )

    def _notify_submitter(self, media: Media, admin_id: str, approved: bool) -> None:
        """Tell the submitter how their entry was reviewed, best effort."""
        notification_type = (
            NotificationType.MEDIA_APPROVED
            if approved
            else NotificationType.MEDIA_REJECTED
        )
        try:
            notification_service.create_notification(
                recipient_id=media.created_by_id,
                notification_type=notification_type,
                actor_id=admin_id,
                media=media,
            )
        except Exception:
            logger.exception(
                "submission_notification_failed",
                media_id=str(media.media_id),
                recipient_id=str(media.created_by_id),
                notification_type=notification_type.value,
            )


# Singleton instance for use throughout the application
catalog_service = CatalogService()
