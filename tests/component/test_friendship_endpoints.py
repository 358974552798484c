"""Component tests for the friendship lifecycle endpoints."""

from core.models import Friendship, Notification
from tests.base import BaseComponentTest
from tests.factories import UserFactory


class TestFriendshipEndpoints(BaseComponentTest):
    """Component tests for /friends."""

    def setUp(self):
        """Set up test fixtures."""
        super().setUp()
        self.alice = UserFactory.create(name="Alice")
        self.bob = UserFactory.create(name="Bob")

    def _send(self, sender, recipient):
        return self.send_as(
            "POST", sender, "friends/request", {"toUserId": str(recipient.user_id)}
        )

    def test_full_lifecycle(self):
        """Request, accept, and both sides see the friendship."""
        response = self._send(self.alice, self.bob)

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data["ok"])
        request_id = data["request"]["requestId"]

        incoming = self.get_as(self.bob, "friends/requests").json()["incoming"]
        self.assertEqual([r["requestId"] for r in incoming], [request_id])

        status = self.get_as(self.bob, f"friends/status/{self.alice.user_id}").json()
        self.assertEqual(status, {"status": "pending_received", "requestId": request_id})

        response = self.send_as(
            "POST", self.bob, "friends/accept", {"requestId": request_id}
        )
        self.assertEqual(response.json(), {"ok": True})

        friends = self.get_as(self.alice, "friends").json()["friends"]
        self.assertEqual([f["user"]["name"] for f in friends], ["Bob"])
        self.assertEqual(
            list(
                Notification.objects.filter(user=self.alice).values_list(
                    "notification_type", flat=True
                )
            ),
            ["FRIEND_ACCEPTED"],
        )

    def test_reverse_request_conflicts(self):
        """B cannot send a request back while A's is pending."""
        self._send(self.alice, self.bob)

        response = self._send(self.bob, self.alice)

        self.assertEqual(response.status_code, 409)
        self.assertEqual(
            response.json(),
            {"error": "They already sent you a request. Accept it from your requests."},
        )
        self.assertEqual(Friendship.objects.count(), 1)

    def test_self_request(self):
        """Users cannot befriend themselves."""
        response = self._send(self.alice, self.alice)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Cannot add yourself"})

    def test_invalid_body(self):
        """A malformed user id is a validation error."""
        response = self.send_as(
            "POST", self.alice, "friends/request", {"toUserId": "bob"}
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "Invalid input")

    def test_decline(self):
        """Declining removes the request."""
        request_id = self._send(self.alice, self.bob).json()["request"]["requestId"]

        response = self.send_as(
            "POST", self.bob, "friends/decline", {"requestId": request_id}
        )

        self.assertEqual(response.status_code, 200)
        self.assertFalse(Friendship.objects.exists())

    def test_sender_cannot_accept(self):
        """Only the recipient can accept."""
        request_id = self._send(self.alice, self.bob).json()["request"]["requestId"]

        response = self.send_as(
            "POST", self.alice, "friends/accept", {"requestId": request_id}
        )

        self.assertEqual(response.status_code, 403)
