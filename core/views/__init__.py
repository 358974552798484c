"""API views for core application."""

from core.views.account_views import MeView, MySubmissionsView, RegisterView, TokenView
from core.views.admin_views import (
    AdminUserDetailView,
    AdminUserListView,
    SubmissionQueueView,
    SubmissionReviewView,
)
from core.views.ai_views import MediaSuggestView
from core.views.catalog_views import (
    CommentDetailView,
    CommentListView,
    MediaDetailView,
    MediaListView,
    ReviewDetailView,
    ReviewListView,
)
from core.views.collection_views import (
    CollectionEntryView,
    CollectionView,
    PublicCollectionView,
    UserSearchView,
)
from core.views.friendship_views import (
    AcceptFriendRequestView,
    DeclineFriendRequestView,
    FriendRequestsView,
    FriendsListView,
    FriendshipStatusView,
    SendFriendRequestView,
)
from core.views.health_views import LivenessCheckView, ReadinessCheckView
from core.views.notification_views import (
    MarkAllReadView,
    MarkReadView,
    NotificationListView,
    UnreadCountView,
)

__all__ = [
    "AcceptFriendRequestView",
    "AdminUserDetailView",
    "AdminUserListView",
    "CollectionEntryView",
    "CollectionView",
    "CommentDetailView",
    "CommentListView",
    "DeclineFriendRequestView",
    "FriendRequestsView",
    "FriendsListView",
    "FriendshipStatusView",
    "LivenessCheckView",
    "MarkAllReadView",
    "MarkReadView",
    "MeView",
    "MediaDetailView",
    "MediaListView",
    "MediaSuggestView",
    "MySubmissionsView",
    "NotificationListView",
    "PublicCollectionView",
    "ReadinessCheckView",
    "RegisterView",
    "ReviewDetailView",
    "ReviewListView",
    "SendFriendRequestView",
    "SubmissionQueueView",
    "SubmissionReviewView",
    "TokenView",
    "UnreadCountView",
    "UserSearchView",
]
