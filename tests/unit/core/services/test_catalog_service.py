"""Tests for CatalogService."""

from unittest.mock import patch
from uuid import uuid4

from rest_framework.exceptions import NotAuthenticated

import pytest

from core.auth import RequestContext
from core.enums import (
    CollectionStatus,
    MediaType,
    NotificationType,
    SubmissionStatus,
)
from core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
)
from core.models import Media, Notification, UserMedia
from core.schemas.media import MediaCreateRequest
import core.services.catalog_service as catalog_module
from core.services.catalog_service import CatalogService
from tests.base import ctx_for
from tests.factories import MediaFactory, UserFactory


@pytest.fixture
def service():
    """Create CatalogService instance."""
    return CatalogService()


@pytest.fixture
def submitter(db):
    """User who submits catalog entries."""
    return UserFactory.create(name="Sam Submitter")


@pytest.fixture
def pending(submitter):
    """A pending submission."""
    return MediaFactory.create_pending(submitter, title="Dune")


@pytest.mark.django_db
class TestCreateSubmission:
    """Creating catalog entries."""

    def test_user_submission_is_pending(self, service, submitter):
        """Regular users' entries wait for review and notify nobody."""
        request = MediaCreateRequest.model_validate(
            {"type": "MOVIE", "title": "Dune", "creator": "Denis Villeneuve"}
        )

        media = service.create_submission(ctx_for(submitter), request)

        assert media.status == SubmissionStatus.PENDING.value
        assert media.created_by_id == submitter.user_id
        assert Notification.objects.count() == 0

    def test_admin_submission_is_approved(self, service, admin_user):
        """Admins' entries skip the queue."""
        request = MediaCreateRequest.model_validate(
            {"type": "GAME", "title": "Hades", "creator": "Supergiant Games"}
        )

        media = service.create_submission(ctx_for(admin_user), request)

        assert media.status == SubmissionStatus.APPROVED.value
        assert media.media_type == MediaType.GAME.value

    def test_add_to_collection(self, service, submitter):
        """The submitter can put the new entry straight into their collection."""
        request = MediaCreateRequest.model_validate(
            {
                "type": "MUSIC",
                "title": "Blue",
                "creator": "Joni Mitchell",
                "addToCollection": True,
                "initialStatus": "COMPLETED",
            }
        )

        media = service.create_submission(ctx_for(submitter), request)

        entry = UserMedia.objects.get(user=submitter, media_id=media.media_id)
        assert entry.status == CollectionStatus.COMPLETED.value
        assert entry.completed_at is not None

    def test_requires_authentication(self, service):
        """Anonymous callers cannot submit."""
        request = MediaCreateRequest.model_validate(
            {"type": "MOVIE", "title": "Dune", "creator": "Denis Villeneuve"}
        )
        with pytest.raises(NotAuthenticated):
            service.create_submission(RequestContext.anonymous(), request)


@pytest.mark.django_db
class TestReviewSubmission:
    """The PENDING -> APPROVED/REJECTED transition."""

    def test_approve_notifies_submitter_once(
        self, service, admin_user, submitter, pending
    ):
        """Approval changes the status and sends one MEDIA_APPROVED."""
        result = service.review_submission(ctx_for(admin_user), pending.media_id, "approve")

        assert result.status == SubmissionStatus.APPROVED.value
        notifications = Notification.objects.filter(user=submitter)
        assert notifications.count() == 1
        notification = notifications.get()
        assert notification.notification_type == NotificationType.MEDIA_APPROVED.value
        assert notification.media_title == "Dune"
        assert notification.actor_id == admin_user.user_id
        assert notification.read_at is None

    def test_reject_stores_note(self, service, admin_user, submitter, pending):
        """Rejection keeps the note and sends MEDIA_REJECTED."""
        result = service.review_submission(
            ctx_for(admin_user), pending.media_id, "reject", "Duplicate of an entry"
        )

        assert result.status == SubmissionStatus.REJECTED.value
        assert result.rejection_note == "Duplicate of an entry"
        assert (
            Notification.objects.get(user=submitter).notification_type
            == NotificationType.MEDIA_REJECTED.value
        )

    def test_approve_clears_note(self, service, admin_user, pending):
        """A note sent with approve is not kept."""
        result = service.review_submission(
            ctx_for(admin_user), pending.media_id, "approve", "ignored"
        )
        assert result.rejection_note is None

    def test_second_review_conflicts_without_notification(
        self, service, admin_user, submitter, pending
    ):
        """A reviewed entry cannot be reviewed again and nothing is re-sent."""
        service.review_submission(ctx_for(admin_user), pending.media_id, "approve")

        with pytest.raises(ConflictError, match="already been approved"):
            service.review_submission(ctx_for(admin_user), pending.media_id, "reject")

        pending.refresh_from_db()
        assert pending.status == SubmissionStatus.APPROVED.value
        assert Notification.objects.filter(user=submitter).count() == 1

    def test_concurrent_review_applies_once(
        self, service, admin_user, submitter, pending
    ):
        """A review that commits between read and write wins; the other conflicts."""
        other_admin = UserFactory.create_admin()
        real_request = catalog_module.SubmissionReviewRequest
        interleaved = []

        def review_by_other_admin_first(**kwargs):
            if not interleaved:
                interleaved.append(True)
                service.review_submission(
                    ctx_for(other_admin), pending.media_id, "approve"
                )
            return real_request(**kwargs)

        with patch.object(
            catalog_module,
            "SubmissionReviewRequest",
            side_effect=review_by_other_admin_first,
        ):
            with pytest.raises(ConflictError, match="already been approved"):
                service.review_submission(ctx_for(admin_user), pending.media_id, "reject")

        pending.refresh_from_db()
        assert pending.status == SubmissionStatus.APPROVED.value
        notifications = Notification.objects.filter(user=submitter)
        assert notifications.count() == 1
        assert notifications.get().actor_id == other_admin.user_id

    def test_non_admin_is_forbidden(self, service, submitter, pending):
        """Only admins review, even with an invalid body."""
        with pytest.raises(ForbiddenError):
            service.review_submission(ctx_for(submitter), pending.media_id, "bogus")

        pending.refresh_from_db()
        assert pending.status == SubmissionStatus.PENDING.value
        assert Notification.objects.count() == 0

    def test_unknown_entry(self, service, admin_user):
        """Reviewing a missing entry is 404."""
        with pytest.raises(NotFoundError):
            service.review_submission(ctx_for(admin_user), uuid4(), "approve")

    def test_invalid_action(self, service, admin_user, pending):
        """Actions other than approve/reject are rejected."""
        with pytest.raises(InvalidInputError) as excinfo:
            service.review_submission(ctx_for(admin_user), pending.media_id, "publish")
        assert excinfo.value.details

    def test_note_too_long(self, service, admin_user, pending):
        """Notes over 1000 characters are rejected."""
        with pytest.raises(InvalidInputError):
            service.review_submission(
                ctx_for(admin_user), pending.media_id, "reject", "x" * 1001
            )

    def test_own_submission_is_not_notified(self, service, admin_user):
        """Admins reviewing their own entry get no notification."""
        media = MediaFactory.create_pending(admin_user)

        service.review_submission(ctx_for(admin_user), media.media_id, "approve")

        assert Notification.objects.count() == 0

    def test_entry_without_submitter(self, service, admin_user):
        """Seeded entries are reviewed without notifying anyone."""
        media = MediaFactory.create(status=SubmissionStatus.PENDING.value)

        result = service.review_submission(ctx_for(admin_user), media.media_id, "reject")

        assert result.status == SubmissionStatus.REJECTED.value
        assert Notification.objects.count() == 0

    def test_notification_failure_keeps_the_review(
        self, service, admin_user, pending
    ):
        """The status change stands when notifying fails."""
        with patch(
            "core.services.catalog_service.notification_service.create_notification",
            side_effect=RuntimeError("inbox down"),
        ):
            result = service.review_submission(
                ctx_for(admin_user), pending.media_id, "approve"
            )

        assert result.status == SubmissionStatus.APPROVED.value
        pending.refresh_from_db()
        assert pending.status == SubmissionStatus.APPROVED.value


@pytest.mark.django_db
class TestEditAndDelete:
    """Editing and deleting entries."""

    def test_submitter_edits_pending_entry(self, service, submitter, pending):
        """Owners may edit while the entry is pending."""
        result = service.edit_submission(
            ctx_for(submitter), pending.media_id, {"title": "Dune: Part One"}
        )
        assert result.title == "Dune: Part One"

    def test_edit_never_changes_status(self, service, admin_user, pending):
        """Moderation state is not an editable field."""
        service.edit_submission(
            ctx_for(admin_user),
            pending.media_id,
            {"status": SubmissionStatus.APPROVED.value, "genre": "Sci-Fi"},
        )
        pending.refresh_from_db()
        assert pending.status == SubmissionStatus.PENDING.value
        assert pending.genre == "Sci-Fi"

    def test_required_fields_are_not_cleared(self, service, submitter, pending):
        """A null title is ignored."""
        service.edit_submission(ctx_for(submitter), pending.media_id, {"title": None})
        pending.refresh_from_db()
        assert pending.title == "Dune"

    def test_submitter_cannot_edit_approved_entry(self, service, submitter):
        """Approved entries are admin-only."""
        media = MediaFactory.create(created_by=submitter)
        with pytest.raises(ForbiddenError):
            service.edit_submission(ctx_for(submitter), media.media_id, {"title": "X"})

    def test_hidden_entry_is_not_found_for_strangers(self, service, user, pending):
        """Someone else's pending submission is 404 for edit and delete."""
        with pytest.raises(NotFoundError):
            service.edit_submission(ctx_for(user), pending.media_id, {"title": "X"})
        with pytest.raises(NotFoundError):
            service.delete_submission(ctx_for(user), pending.media_id)
        assert Media.objects.filter(media_id=pending.media_id, title="Dune").exists()

    def test_other_user_cannot_delete_approved_entry(self, service, user, submitter):
        """A visible entry owned by someone else is 403."""
        media = MediaFactory.create(created_by=submitter)
        with pytest.raises(ForbiddenError):
            service.delete_submission(ctx_for(user), media.media_id)

    def test_submitter_deletes_rejected_entry(self, service, submitter):
        """Owners may delete entries that were not approved."""
        media = MediaFactory.create_pending(
            submitter, status=SubmissionStatus.REJECTED.value
        )
        service.delete_submission(ctx_for(submitter), media.media_id)
        assert not Media.objects.filter(media_id=media.media_id).exists()


@pytest.mark.django_db
class TestListing:
    """Catalog listings and visibility."""

    def test_catalog_lists_only_approved(self, service, submitter, pending):
        """Pending and rejected entries stay out of the public catalog."""
        approved = MediaFactory.create(title="Arrival")
        MediaFactory.create_pending(submitter, status=SubmissionStatus.REJECTED.value)

        catalog = service.list_catalog()

        assert [m.media_id for m in catalog.media] == [approved.media_id]

    def test_catalog_filters(self, service):
        """Query, genre and type filters combine."""
        MediaFactory.create(title="Arrival", creator="Villeneuve", genre="Sci-Fi")
        MediaFactory.create(title="Amadeus", creator="Forman", genre="Drama")
        MediaFactory.create(
            title="Astro Bot",
            creator="Team Asobi",
            genre="Sci-Fi",
            media_type=MediaType.GAME.value,
        )

        assert service.list_catalog(q="arr").total == 1
        assert service.list_catalog(genre="Sci-Fi").total == 2
        assert service.list_catalog(genre="Sci-Fi", media_type="GAME").total == 1
        assert service.list_catalog(media_type="BOOK").total == 3

    def test_pending_entry_hidden_from_others(self, service, user, submitter, pending):
        """Only the submitter and admins can see a pending entry."""
        assert service.get_entry(ctx_for(submitter), pending.media_id).title == "Dune"
        with pytest.raises(NotFoundError):
            service.get_entry(ctx_for(user), pending.media_id)
        with pytest.raises(NotFoundError):
            service.get_entry(RequestContext.anonymous(), pending.media_id)

    def test_admin_sees_pending_entry(self, service, admin_user, pending):
        """Admins can open any entry."""
        assert service.get_entry(ctx_for(admin_user), pending.media_id)

    def test_my_submissions(self, service, submitter, pending):
        """Submitters see their own entries in every status."""
        rejected = MediaFactory.create_pending(
            submitter, status=SubmissionStatus.REJECTED.value
        )
        MediaFactory.create(title="Someone else's")

        result = service.list_my_submissions(ctx_for(submitter))

        assert {m.media_id for m in result.media} == {
            pending.media_id,
            rejected.media_id,
        }

    def test_pending_queue_is_admin_only(self, service, admin_user, submitter, pending):
        """The queue lists pending entries with their submitter."""
        queue = service.list_pending(ctx_for(admin_user))

        assert queue.total == 1
        assert queue.submissions[0].created_by.name == "Sam Submitter"
        with pytest.raises(ForbiddenError):
            service.list_pending(ctx_for(submitter))
