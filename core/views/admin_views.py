"""Admin endpoints: submission moderation and account management."""

import structlog
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from core.auth import JWTAuthentication, RequestContext
from core.schemas.user import AdminUserUpdateRequest
from core.services.catalog_service import catalog_service
from core.services.user_service import user_service
from core.views.base import ok_response, parse_body, schema_response

logger = structlog.get_logger(__name__)


class SubmissionQueueView(APIView):
    """API endpoint for the moderation queue.

    Requires the ADMIN role.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """List PENDING submissions, newest first, with their submitters."""
        ctx = RequestContext.from_request(request)
        return schema_response(catalog_service.list_pending(ctx))


class SubmissionReviewView(APIView):
    """API endpoint for approving or rejecting a submission.

    PATCH body: ``{action: "approve" | "reject", rejectionNote?}``.
    Requires the ADMIN role.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def patch(self, request, media_id):
        """Review a pending submission.

        The body is validated after the role and existence checks, so a
        non-admin always gets 403 whatever they send.

        Returns:
            200 with the reviewed entry
            400 if the action or note is invalid
            401 if authentication fails
            403 if the caller is not an admin
            404 if the entry does not exist
            409 if the entry has already been reviewed
        """
        ctx = RequestContext.from_request(request)
        data = request.data if isinstance(request.data, dict) else {}
        logger.info(
            "Submission review request received",
            media_id=str(media_id),
            user_id=ctx.user_id,
        )
        media = catalog_service.review_submission(
            ctx,
            media_id,
            action=data.get("action"),
            rejection_note=data.get("rejectionNote", data.get("rejection_note")),
        )
        return schema_response(media)


class AdminUserListView(APIView):
    """API endpoint listing every account. Requires the ADMIN role."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """List users, newest first, with submission counts."""
        ctx = RequestContext.from_request(request)
        return schema_response(user_service.list_users(ctx))


class AdminUserDetailView(APIView):
    """API endpoint for disabling or deleting an account.

    Admin accounts cannot be modified or deleted.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def patch(self, request, user_id):
        """Enable or disable the account with ``{disabled}``."""
        ctx = RequestContext.from_request(request)
        update = parse_body(AdminUserUpdateRequest, request.data)
        user = user_service.set_disabled(ctx, user_id, update.disabled)
        return schema_response(user)

    def delete(self, request, user_id):
        """Delete the account."""
        ctx = RequestContext.from_request(request)
        user_service.delete_user(ctx, user_id)
        return ok_response()
