"""Repository for user-related database queries."""

from uuid import UUID

from django.db.models import Count, Q, QuerySet

from core.models import User


class UserRepository:
    """Repository for encapsulating user database queries.

    Provides a clean interface for the user lookups shared by the account,
    friendship and admin services.
    """

    @staticmethod
    def get_active_user(user_id: UUID | str) -> User | None:
        """Return the user unless they do not exist or are disabled."""
        return User.objects.filter(user_id=user_id, disabled=False).first()

    @staticmethod
    def get_by_email(email: str) -> User | None:
        """Case-insensitive lookup by email address."""
        return User.objects.filter(email__iexact=email.strip()).first()

    @staticmethod
    def search(query: str, exclude_user_id: UUID | str, limit: int) -> QuerySet[User]:
        """Find enabled users whose name or email contains ``query``.

        Args:
            query: Substring matched case-insensitively
            exclude_user_id: User left out of the results (the caller)
            limit: Maximum number of results

        Returns:
            QuerySet of matching users ordered by name
        """
        return (
            User.objects.filter(disabled=False)
            .exclude(user_id=exclude_user_id)
            .filter(Q(name__icontains=query) | Q(email__icontains=query))
            .order_by("name", "email")[:limit]
        )

    @staticmethod
    def list_with_submission_counts() -> QuerySet[User]:
        """All users, newest first, annotated with ``submission_count``."""
        return User.objects.annotate(submission_count=Count("submissions")).order_by(
            "-created_at"
        )
