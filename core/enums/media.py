"""Catalog and collection enumerations."""

from enum import Enum


class MediaType(str, Enum):
    """Kinds of work tracked in the catalog."""

    MOVIE = "MOVIE"
    MUSIC = "MUSIC"
    GAME = "GAME"


class SubmissionStatus(str, Enum):
    """Moderation state of a catalog entry.

    PENDING moves to APPROVED or REJECTED exactly once. Neither of those
    has an outgoing transition; the only way out is deletion.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ReviewAction(str, Enum):
    """Admin decision on a pending submission."""

    APPROVE = "approve"
    REJECT = "reject"


class CollectionStatus(str, Enum):
    """A user's relationship to an item in their collection."""

    OWNED = "OWNED"
    WISHLIST = "WISHLIST"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
