"""Repository for catalog queries."""

from uuid import UUID

from django.db.models import Q, QuerySet

from core.auth.context import RequestContext
from core.enums import SubmissionStatus
from core.models import Media


class MediaRepository:
    """Catalog lookups that respect moderation visibility.

    APPROVED entries are visible to everyone; PENDING and REJECTED entries
    only to their submitter and to admins.
    """

    @staticmethod
    def visible_to(ctx: RequestContext) -> QuerySet[Media]:
        """Entries the caller is allowed to see."""
        queryset = Media.objects.all()
        if ctx.is_admin:
            return queryset
        visible = Q(status=SubmissionStatus.APPROVED.value)
        if ctx.authenticated:
            visible |= Q(created_by_id=ctx.user_id)
        return queryset.filter(visible)

    @staticmethod
    def get_visible(ctx: RequestContext, media_id: UUID | str) -> Media | None:
        """Return the entry if it exists and the caller may see it."""
        return MediaRepository.visible_to(ctx).filter(media_id=media_id).first()

    @staticmethod
    def approved() -> QuerySet[Media]:
        """The public catalog."""
        return Media.objects.filter(status=SubmissionStatus.APPROVED.value)
