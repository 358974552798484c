"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    AcceptFriendRequestView,
    AdminUserDetailView,
    AdminUserListView,
    CollectionEntryView,
    CollectionView,
    CommentDetailView,
    CommentListView,
    DeclineFriendRequestView,
    FriendRequestsView,
    FriendsListView,
    FriendshipStatusView,
    LivenessCheckView,
    MarkAllReadView,
    MarkReadView,
    MediaDetailView,
    MediaListView,
    MediaSuggestView,
    MeView,
    MySubmissionsView,
    NotificationListView,
    PublicCollectionView,
    ReadinessCheckView,
    RegisterView,
    ReviewDetailView,
    ReviewListView,
    SendFriendRequestView,
    SubmissionQueueView,
    SubmissionReviewView,
    TokenView,
    UnreadCountView,
    UserSearchView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # Account endpoints
    path("auth/register", RegisterView.as_view(), name="auth-register"),
    path("auth/token", TokenView.as_view(), name="auth-token"),
    path("me", MeView.as_view(), name="me"),
    path("me/submissions", MySubmissionsView.as_view(), name="my-submissions"),
    # Catalog endpoints
    path("media", MediaListView.as_view(), name="media-list"),
    path("media/<uuid:media_id>", MediaDetailView.as_view(), name="media-detail"),
    path(
        "media/<uuid:media_id>/reviews",
        ReviewListView.as_view(),
        name="media-reviews",
    ),
    path(
        "media/<uuid:media_id>/reviews/<uuid:review_id>",
        ReviewDetailView.as_view(),
        name="media-review-detail",
    ),
    path(
        "media/<uuid:media_id>/comments",
        CommentListView.as_view(),
        name="media-comments",
    ),
    path(
        "media/<uuid:media_id>/comments/<uuid:comment_id>",
        CommentDetailView.as_view(),
        name="media-comment-detail",
    ),
    # Collection endpoints
    path("collection", CollectionView.as_view(), name="collection"),
    path(
        "collection/<uuid:entry_id>",
        CollectionEntryView.as_view(),
        name="collection-entry",
    ),
    path("users/search", UserSearchView.as_view(), name="user-search"),
    path(
        "users/<uuid:user_id>/collection",
        PublicCollectionView.as_view(),
        name="user-collection",
    ),
    # Friendship endpoints
    path("friends", FriendsListView.as_view(), name="friends"),
    path("friends/requests", FriendRequestsView.as_view(), name="friend-requests"),
    path(
        "friends/request",
        SendFriendRequestView.as_view(),
        name="friend-request-send",
    ),
    path(
        "friends/accept",
        AcceptFriendRequestView.as_view(),
        name="friend-request-accept",
    ),
    path(
        "friends/decline",
        DeclineFriendRequestView.as_view(),
        name="friend-request-decline",
    ),
    path(
        "friends/status/<uuid:user_id>",
        FriendshipStatusView.as_view(),
        name="friendship-status",
    ),
    # Notification endpoints
    path("notifications", NotificationListView.as_view(), name="notifications"),
    path(
        "notifications/unread-count",
        UnreadCountView.as_view(),
        name="notifications-unread-count",
    ),
    path(
        "notifications/read-all",
        MarkAllReadView.as_view(),
        name="notifications-read-all",
    ),
    path(
        "notifications/<uuid:notification_id>/read",
        MarkReadView.as_view(),
        name="notification-read",
    ),
    # Admin endpoints
    path(
        "admin/submissions",
        SubmissionQueueView.as_view(),
        name="admin-submissions",
    ),
    path(
        "admin/submissions/<uuid:media_id>",
        SubmissionReviewView.as_view(),
        name="admin-submission-review",
    ),
    path("admin/users", AdminUserListView.as_view(), name="admin-users"),
    path(
        "admin/users/<uuid:user_id>",
        AdminUserDetailView.as_view(),
        name="admin-user-detail",
    ),
    # AI endpoints
    path("ai/media-suggest", MediaSuggestView.as_view(), name="ai-media-suggest"),
]
