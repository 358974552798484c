"""Component tests for submission moderation.

Covers the admin queue and PATCH /admin/submissions/{id} through the full
Django request/response cycle, including the notification sent to the
submitter.
"""

from uuid import uuid4

from core.enums import NotificationType, SubmissionStatus
from core.models import Media, Notification
from tests.base import BaseComponentTest
from tests.factories import MediaFactory, UserFactory


class TestSubmissionReviewEndpoint(BaseComponentTest):
    """Component tests for PATCH /admin/submissions/{id}."""

    def setUp(self):
        """Set up test fixtures."""
        super().setUp()
        self.admin = UserFactory.create_admin(name="Ada Admin")
        self.submitter = UserFactory.create(name="Sam Submitter")
        self.media = MediaFactory.create_pending(self.submitter, title="Dune")
        self.path = f"admin/submissions/{self.media.media_id}"

    def test_approve_then_second_review_conflicts(self):
        """Approve returns 200 once; a second review is 409 and notifies nobody."""
        response = self.send_as("PATCH", self.admin, self.path, {"action": "approve"})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "APPROVED")
        self.assertEqual(data["mediaId"], str(self.media.media_id))

        notifications = Notification.objects.filter(user=self.submitter)
        self.assertEqual(notifications.count(), 1)
        self.assertEqual(
            notifications.get().notification_type,
            NotificationType.MEDIA_APPROVED.value,
        )

        response = self.send_as(
            "PATCH",
            self.admin,
            self.path,
            {"action": "reject", "rejectionNote": "Changed my mind"},
        )

        self.assertEqual(response.status_code, 409)
        self.assertIn("error", response.json())
        self.media.refresh_from_db()
        self.assertEqual(self.media.status, SubmissionStatus.APPROVED.value)
        self.assertEqual(Notification.objects.filter(user=self.submitter).count(), 1)

    def test_reject_with_note(self):
        """Rejection stores the note and the submitter's inbox shows it."""
        response = self.send_as(
            "PATCH",
            self.admin,
            self.path,
            {"action": "reject", "rejectionNote": "Already in the catalog"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["rejectionNote"], "Already in the catalog")

        inbox = self.get_as(self.submitter, "notifications").json()
        self.assertEqual(inbox["unreadCount"], 1)
        self.assertEqual(
            inbox["notifications"][0]["notificationType"], "MEDIA_REJECTED"
        )
        self.assertEqual(inbox["notifications"][0]["mediaTitle"], "Dune")

    def test_non_admin_forbidden(self):
        """Regular users get 403 and nothing changes."""
        response = self.send_as(
            "PATCH", self.submitter, self.path, {"action": "approve"}
        )

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json(), {"error": "Forbidden"})
        self.media.refresh_from_db()
        self.assertEqual(self.media.status, SubmissionStatus.PENDING.value)
        self.assertFalse(Notification.objects.exists())

    def test_anonymous_unauthorized(self):
        """Missing credentials give 401."""
        response = self.send_as("PATCH", None, self.path, {"action": "approve"})
        self.assertEqual(response.status_code, 401)
        self.assertIn("error", response.json())

    def test_invalid_action(self):
        """Unknown actions are 400 with details."""
        response = self.send_as("PATCH", self.admin, self.path, {"action": "publish"})

        self.assertEqual(response.status_code, 400)
        self.assertIn("details", response.json())

    def test_missing_entry(self):
        """Unknown entries are 404."""
        response = self.send_as(
            "PATCH", self.admin, f"admin/submissions/{uuid4()}", {"action": "approve"}
        )
        self.assertEqual(response.status_code, 404)

    def test_queue(self):
        """The queue lists pending entries with their submitter."""
        MediaFactory.create(title="Already approved")

        response = self.get_as(self.admin, "admin/submissions")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["total"], 1)
        self.assertEqual(data["submissions"][0]["createdBy"]["name"], "Sam Submitter")

        self.assertEqual(self.get_as(self.submitter, "admin/submissions").status_code, 403)

    def test_submit_then_approve_flow(self):
        """A user submission appears in the catalog only after approval."""
        response = self.send_as(
            "POST",
            self.submitter,
            "media",
            {"type": "GAME", "title": "Outer Wilds", "creator": "Mobius Digital"},
        )
        self.assertEqual(response.status_code, 201)
        media_id = response.json()["mediaId"]
        self.assertEqual(response.json()["status"], "PENDING")

        catalog = self.get_as(None, "media").json()
        self.assertNotIn(media_id, [m["mediaId"] for m in catalog["media"]])

        self.send_as("PATCH", self.admin, f"admin/submissions/{media_id}", {"action": "approve"})

        catalog = self.get_as(None, "media").json()
        self.assertIn(media_id, [m["mediaId"] for m in catalog["media"]])
        self.assertTrue(Media.objects.get(media_id=media_id).is_approved)
