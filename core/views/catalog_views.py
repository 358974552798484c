"""Catalog endpoints: entries, reviews and comments."""

from rest_framework import status
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.views import APIView

from core.auth import JWTAuthentication, RequestContext
from core.schemas.comment import CommentRequest
from core.schemas.media import MediaCreateRequest, MediaUpdateRequest
from core.schemas.review import ReviewCreateRequest, ReviewUpdateRequest
from core.services.catalog_service import catalog_service
from core.services.comment_service import comment_service
from core.services.review_service import review_service
from core.views.base import ok_response, parse_body, schema_response


class MediaListView(APIView):
    """Browse the public catalog or submit a new entry.

    GET is public and lists APPROVED entries only, filtered by ``q``,
    ``genre`` and ``type``. POST requires authentication; entries submitted
    by admins are approved immediately, everyone else's wait for review.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticatedOrReadOnly,)

    def get(self, request):
        """List the public catalog ordered by title."""
        catalog = catalog_service.list_catalog(
            q=request.query_params.get("q"),
            genre=request.query_params.get("genre"),
            media_type=request.query_params.get("type"),
        )
        return schema_response(catalog)

    def post(self, request):
        """Submit a catalog entry."""
        ctx = RequestContext.from_request(request)
        create_request = parse_body(MediaCreateRequest, request.data)
        media = catalog_service.create_submission(ctx, create_request)
        return schema_response(media, status.HTTP_201_CREATED)


class MediaDetailView(APIView):
    """Read, edit or delete a single catalog entry.

    Entries that are not APPROVED are only visible to their submitter and
    to admins; everyone else gets 404.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticatedOrReadOnly,)

    def get(self, request, media_id):
        """Return the entry if the caller may see it."""
        ctx = RequestContext.from_request(request)
        return schema_response(catalog_service.get_entry(ctx, media_id))

    def patch(self, request, media_id):
        """Edit descriptive fields (admin, or submitter while PENDING)."""
        ctx = RequestContext.from_request(request)
        update = parse_body(MediaUpdateRequest, request.data)
        media = catalog_service.edit_submission(
            ctx, media_id, update.model_dump(exclude_unset=True)
        )
        return schema_response(media)

    def delete(self, request, media_id):
        """Delete the entry (admin, or submitter while not APPROVED)."""
        ctx = RequestContext.from_request(request)
        catalog_service.delete_submission(ctx, media_id)
        return ok_response()


class ReviewListView(APIView):
    """Reviews of a catalog entry."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticatedOrReadOnly,)

    def get(self, request, media_id):
        """List reviews with the average rating."""
        ctx = RequestContext.from_request(request)
        return schema_response(review_service.list_reviews(ctx, media_id))

    def post(self, request, media_id):
        """Review the entry as the caller."""
        ctx = RequestContext.from_request(request)
        review_request = parse_body(ReviewCreateRequest, request.data)
        review = review_service.create_review(ctx, media_id, review_request)
        return schema_response(review, status.HTTP_201_CREATED)


class ReviewDetailView(APIView):
    """Edit or delete a review (author or admin)."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticatedOrReadOnly,)

    def patch(self, request, media_id, review_id):
        """Update rating and/or body."""
        ctx = RequestContext.from_request(request)
        update = parse_body(ReviewUpdateRequest, request.data)
        review = review_service.update_review(
            ctx, media_id, review_id, update.model_dump(exclude_unset=True)
        )
        return schema_response(review)

    def delete(self, request, media_id, review_id):
        """Delete the review."""
        ctx = RequestContext.from_request(request)
        review_service.delete_review(ctx, media_id, review_id)
        return ok_response()


class CommentListView(APIView):
    """Comments on a catalog entry."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticatedOrReadOnly,)

    def get(self, request, media_id):
        """List comments, oldest first."""
        ctx = RequestContext.from_request(request)
        return schema_response(comment_service.list_comments(ctx, media_id))

    def post(self, request, media_id):
        """Post a comment as the caller."""
        ctx = RequestContext.from_request(request)
        comment_request = parse_body(CommentRequest, request.data)
        comment = comment_service.create_comment(ctx, media_id, comment_request.body)
        return schema_response(comment, status.HTTP_201_CREATED)


class CommentDetailView(APIView):
    """Edit or delete a comment (author or admin)."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticatedOrReadOnly,)

    def patch(self, request, media_id, comment_id):
        """Replace the comment body."""
        ctx = RequestContext.from_request(request)
        comment_request = parse_body(CommentRequest, request.data)
        comment = comment_service.update_comment(
            ctx, media_id, comment_id, comment_request.body
        )
        return schema_response(comment)

    def delete(self, request, media_id, comment_id):
        """Delete the comment."""
        ctx = RequestContext.from_request(request)
        comment_service.delete_comment(ctx, media_id, comment_id)
        return ok_response()
