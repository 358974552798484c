"""Collection and user directory endpoints."""

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from core.auth import JWTAuthentication, RequestContext
from core.schemas.collection import CollectionAddRequest, CollectionUpdateRequest
from core.services.collection_service import collection_service
from core.services.user_service import user_service
from core.views.base import ok_response, parse_body, schema_response


class CollectionView(APIView):
    """The caller's collection.

    GET accepts an optional ``status`` filter. POST adds a catalog entry
    with ``{mediaId, status?, notes?}``; status defaults to WISHLIST and a
    second add of the same entry is rejected with 409.
    """

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """List the caller's collection, most recently added first."""
        ctx = RequestContext.from_request(request)
        collection = collection_service.list_collection(
            ctx, status=request.query_params.get("status")
        )
        return schema_response(collection)

    def post(self, request):
        """Add an entry to the caller's collection."""
        ctx = RequestContext.from_request(request)
        add_request = parse_body(CollectionAddRequest, request.data)
        entry = collection_service.add(
            ctx, add_request.media_id, add_request.status, add_request.notes
        )
        return schema_response(entry, status.HTTP_201_CREATED)


class CollectionEntryView(APIView):
    """Update or remove one of the caller's collection entries."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def patch(self, request, entry_id):
        """Change status and/or notes."""
        ctx = RequestContext.from_request(request)
        update = parse_body(CollectionUpdateRequest, request.data)
        entry = collection_service.update(
            ctx, entry_id, update.model_dump(exclude_unset=True)
        )
        return schema_response(entry)

    def delete(self, request, entry_id):
        """Remove the entry."""
        ctx = RequestContext.from_request(request)
        collection_service.remove(ctx, entry_id)
        return ok_response()


class PublicCollectionView(APIView):
    """Another user's collection, when their profile is public."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (AllowAny,)

    def get(self, _request, user_id):
        """Return the collection or 403 if the profile is private."""
        return schema_response(collection_service.public_collection(user_id))


class UserSearchView(APIView):
    """Find other users by name or email, for adding friends."""

    authentication_classes = (JWTAuthentication,)
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """Search with ``q`` (at least two characters)."""
        ctx = RequestContext.from_request(request)
        return schema_response(
            user_service.search_users(ctx, request.query_params.get("q"))
        )
