"""Service for ratings and reviews of catalog entries."""

from typing import Any
from uuid import UUID

import structlog

from core.auth.context import RequestContext
from core.exceptions import ForbiddenError, NotFoundError
from core.models import Media, Review
from core.repositories import MediaRepository
from core.schemas.review import (
    ReviewCreateRequest,
    ReviewListResponse,
    ReviewResponse,
)

logger = structlog.get_logger(__name__)


class ReviewService:
    """Reviews are attached to catalog entries the caller can see.

    Authors manage their own reviews; admins may edit or remove any.
    """

    def list_reviews(
        self, ctx: RequestContext, media_id: UUID | str
    ) -> ReviewListResponse:
        """Reviews of an entry, newest first, with the average rating."""
        media = self._get_media(ctx, media_id)
        reviews = list(
            Review.objects.select_related("user")
            .filter(media=media)
            .order_by("-created_at")
        )
        average = (
            round(sum(r.rating for r in reviews) / len(reviews), 1) if reviews else None
        )
        return ReviewListResponse(
            reviews=[ReviewResponse.model_validate(r) for r in reviews],
            average_rating=average,
            total=len(reviews),
        )

    def create_review(
        self, ctx: RequestContext, media_id: UUID | str, request: ReviewCreateRequest
    ) -> ReviewResponse:
        """Review an entry as the caller."""
        user_id = ctx.require_authenticated()
        media = self._get_media(ctx, media_id)
        review = Review.objects.create(
            user_id=user_id,
            media=media,
            rating=request.rating,
            body=request.body or None,
        )
        logger.info(
            "review_created",
            review_id=str(review.review_id),
            media_id=str(media.media_id),
            user_id=user_id,
            rating=review.rating,
        )
        review = Review.objects.select_related("user").get(review_id=review.review_id)
        return ReviewResponse.model_validate(review)

    def update_review(
        self,
        ctx: RequestContext,
        media_id: UUID | str,
        review_id: UUID | str,
        fields: dict[str, Any],
    ) -> ReviewResponse:
        """Change the rating and/or body of a review."""
        review = self._get_manageable(ctx, media_id, review_id)
        changed = []
        if fields.get("rating") is not None:
            review.rating = fields["rating"]
            changed.append("rating")
        if "body" in fields:
            review.body = fields["body"] or None
            changed.append("body")
        if changed:
            review.save(update_fields=[*changed, "updated_at"])
            logger.info("review_updated", review_id=str(review.review_id))
        return ReviewResponse.model_validate(review)

    def delete_review(
        self, ctx: RequestContext, media_id: UUID | str, review_id: UUID | str
    ) -> None:
        """Remove a review."""
        review = self._get_manageable(ctx, media_id, review_id)
        review.delete()
        logger.info("review_deleted", review_id=str(review_id))

    def _get_media(self, ctx: RequestContext, media_id: UUID | str) -> Media:
        media = MediaRepository.get_visible(ctx, media_id)
        if media is None:
            raise NotFoundError("Media not found")
        return media

    def _get_manageable(
        self, ctx: RequestContext, media_id: UUID | str, review_id: UUID | str
    ) -> Review:
        ctx.require_authenticated()
        media = self._get_media(ctx, media_id)
        review = (
            Review.objects.select_related("user")
            .filter(review_id=review_id, media=media)
            .first()
        )
        if review is None:
            raise NotFoundError("Review not found")
        if not (ctx.is_admin or ctx.is_user(review.user_id)):
            raise ForbiddenError("Forbidden")
        return review


# Singleton instance for use throughout the application
review_service = ReviewService()
