"""AI suggestion endpoint."""

from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from core.auth import JWTAuthentication, RequestContext
from core.schemas.ai import MediaSuggestRequest
from core.services.suggestion_service import suggestion_service
from core.views.base import parse_body, schema_response


class MediaSuggestView(APIView):
    """Suggest real media items from a free-text description.

    POST body: ``{description}``. Returns ``{suggestions, model}``; 400 for a
    description shorter than three characters, 422 when the model reply
    holds nothing usable, 502 on model errors and 503 when the model is
    warming up (``retryable: true``) or not configured.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def post(self, request):
        """Handle POST request for suggestions."""
        ctx = RequestContext.from_request(request)
        suggest_request = parse_body(MediaSuggestRequest, request.data)
        return schema_response(
            suggestion_service.suggest(ctx, suggest_request.description)
        )
