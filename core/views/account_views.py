"""Account endpoints: registration, tokens and the caller's profile."""

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from core.auth import JWTAuthentication, RequestContext
from core.schemas.user import ProfileUpdateRequest, RegisterRequest, TokenRequest
from core.services.catalog_service import catalog_service
from core.services.user_service import user_service
from core.views.base import parse_body, schema_response


class RegisterView(APIView):
    """Create a user account.

    POST body: ``{email, password, name?}``. Returns the new profile with
    201, 400 on invalid input and 409 when the email is taken.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def post(self, request):
        """Handle POST request to register an account."""
        register_request = parse_body(RegisterRequest, request.data)
        profile = user_service.register(register_request)
        return schema_response(profile, status.HTTP_201_CREATED)


class TokenView(APIView):
    """Exchange email and password for a bearer access token."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def post(self, request):
        """Handle POST request to issue an access token.

        Returns:
            200 with ``{accessToken, tokenType, expiresIn}``
            400 if the body is malformed
            401 if the credentials do not match an active account
        """
        token_request = parse_body(TokenRequest, request.data)
        token = user_service.issue_token(token_request.email, token_request.password)
        return schema_response(token)


class MeView(APIView):
    """The caller's own profile."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """Return the caller's profile."""
        ctx = RequestContext.from_request(request)
        return schema_response(user_service.get_profile(ctx))

    def patch(self, request):
        """Update name and/or profile visibility."""
        ctx = RequestContext.from_request(request)
        update = parse_body(ProfileUpdateRequest, request.data)
        profile = user_service.update_profile(ctx, update.model_dump(exclude_unset=True))
        return schema_response(profile)


class MySubmissionsView(APIView):
    """Catalog entries submitted by the caller, in any moderation state."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """Return the caller's submissions, newest first."""
        ctx = RequestContext.from_request(request)
        return schema_response(catalog_service.list_my_submissions(ctx))
