"""Service for discussion comments on catalog entries."""

from uuid import UUID

import structlog

from core.auth.context import RequestContext
from core.exceptions import ForbiddenError, NotFoundError
from core.models import Comment, Media
from core.repositories import MediaRepository
from core.schemas.comment import CommentListResponse, CommentResponse

logger = structlog.get_logger(__name__)


class CommentService:
    """Comments on entries the caller can see; authors or admins manage them."""

    def list_comments(
        self, ctx: RequestContext, media_id: UUID | str
    ) -> CommentListResponse:
        """Comments on an entry, oldest first."""
        media = self._get_media(ctx, media_id)
        comments = list(
            Comment.objects.select_related("user")
            .filter(media=media)
            .order_by("created_at")
        )
        return CommentListResponse(
            comments=[CommentResponse.model_validate(c) for c in comments],
            total=len(comments),
        )

    def create_comment(
        self, ctx: RequestContext, media_id: UUID | str, body: str
    ) -> CommentResponse:
        """Post a comment as the caller."""
        user_id = ctx.require_authenticated()
        media = self._get_media(ctx, media_id)
        comment = Comment.objects.create(user_id=user_id, media=media, body=body)
        logger.info(
            "comment_created",
            comment_id=str(comment.comment_id),
            media_id=str(media.media_id),
            user_id=user_id,
        )
        comment = Comment.objects.select_related("user").get(
            comment_id=comment.comment_id
        )
        return CommentResponse.model_validate(comment)

    def update_comment(
        self,
        ctx: RequestContext,
        media_id: UUID | str,
        comment_id: UUID | str,
        body: str,
    ) -> CommentResponse:
        """Replace the body of a comment."""
        comment = self._get_manageable(ctx, media_id, comment_id)
        comment.body = body
        comment.save(update_fields=["body", "updated_at"])
        logger.info("comment_updated", comment_id=str(comment.comment_id))
        return CommentResponse.model_validate(comment)

    def delete_comment(
        self, ctx: RequestContext, media_id: UUID | str, comment_id: UUID | str
    ) -> None:
        """Remove a comment."""
        comment = self._get_manageable(ctx, media_id, comment_id)
        comment.delete()
        logger.info("comment_deleted", comment_id=str(comment_id))

    def _get_media(self, ctx: RequestContext, media_id: UUID | str) -> Media:
        media = MediaRepository.get_visible(ctx, media_id)
        if media is None:
            raise NotFoundError("Media not found")
        return media

    def _get_manageable(
        self, ctx: RequestContext, media_id: UUID | str, comment_id: UUID | str
    ) -> Comment:
        ctx.require_authenticated()
        media = self._get_media(ctx, media_id)
        comment = (
            Comment.objects.select_related("user")
            .filter(comment_id=comment_id, media=media)
            .first()
        )
        if comment is None:
            raise NotFoundError("Comment not found")
        if not (ctx.is_admin or ctx.is_user(comment.user_id)):
            raise ForbiddenError("Forbidden")
        return comment


# Singleton instance for use throughout the application
comment_service = CommentService()
