"""Component tests for the collection endpoints."""

from core.models import UserMedia
from tests.base import BaseComponentTest
from tests.factories import MediaFactory, UserFactory


class TestCollectionEndpoints(BaseComponentTest):
    """Component tests for /collection and public collections."""

    def setUp(self):
        """Set up test fixtures."""
        super().setUp()
        self.user = UserFactory.create()
        self.media = MediaFactory.create(title="Arrival")

    def _add(self, status=None):
        body = {"mediaId": str(self.media.media_id)}
        if status:
            body["status"] = status
        return self.send_as("POST", self.user, "collection", body)

    def test_duplicate_add_conflicts(self):
        """The second add of the same entry is 409."""
        first = self._add()
        second = self._add("OWNED")

        self.assertEqual(first.status_code, 201)
        self.assertEqual(first.json()["status"], "WISHLIST")
        self.assertEqual(second.status_code, 409)
        self.assertEqual(second.json(), {"error": "Already in your collection"})
        self.assertEqual(UserMedia.objects.filter(user=self.user).count(), 1)

    def test_completed_at_set_and_cleared(self):
        """completedAt follows the COMPLETED status."""
        entry_id = self._add().json()["entryId"]
        path = f"collection/{entry_id}"

        completed = self.send_as("PATCH", self.user, path, {"status": "COMPLETED"})
        self.assertEqual(completed.status_code, 200)
        self.assertIsNotNone(completed.json()["completedAt"])

        reset = self.send_as("PATCH", self.user, path, {"status": "IN_PROGRESS"})
        self.assertIsNone(reset.json()["completedAt"])

    def test_list_and_remove(self):
        """Entries are listed with their media and can be removed."""
        entry_id = self._add().json()["entryId"]

        listing = self.get_as(self.user, "collection").json()
        self.assertEqual(listing["total"], 1)
        self.assertEqual(listing["entries"][0]["media"]["title"], "Arrival")

        response = self.send_as("DELETE", self.user, f"collection/{entry_id}")
        self.assertEqual(response.json(), {"ok": True})
        self.assertEqual(self.get_as(self.user, "collection").json()["total"], 0)

    def test_invalid_status(self):
        """Unknown statuses are rejected."""
        response = self._add("LENT")
        self.assertEqual(response.status_code, 400)

    def test_public_collection(self):
        """Public collections are readable anonymously; private ones are not."""
        self._add()
        path = f"users/{self.user.user_id}/collection"

        self.assertEqual(self.get_as(None, path).status_code, 403)

        self.send_as("PATCH", self.user, "me", {"profilePublic": True})
        response = self.get_as(None, path)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["total"], 1)

    def test_user_search(self):
        """Search finds other users by name."""
        UserFactory.create(name="Quentin Quill")

        response = self.get_as(self.user, "users/search", {"q": "quill"})

        self.assertEqual(
            [u["name"] for u in response.json()["users"]], ["Quentin Quill"]
        )
