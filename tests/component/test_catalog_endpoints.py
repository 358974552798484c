"""Component tests for catalog, review and comment endpoints."""

from uuid import uuid4

from tests.base import BaseComponentTest
from tests.factories import MediaFactory, UserFactory


class TestCatalogEndpoints(BaseComponentTest):
    """Component tests for /media."""

    def setUp(self):
        """Set up test fixtures."""
        super().setUp()
        self.user = UserFactory.create()
        self.media = MediaFactory.create(title="Arrival", creator="Denis Villeneuve")

    def test_public_listing(self):
        """Anonymous callers browse the approved catalog."""
        MediaFactory.create_pending(self.user, title="Hidden")

        response = self.get_as(None, "media")

        self.assertEqual(response.status_code, 200)
        titles = [m["title"] for m in response.json()["media"]]
        self.assertEqual(titles, ["Arrival"])

    def test_anonymous_cannot_submit(self):
        """Submitting requires authentication."""
        response = self.send_as(
            "POST", None, "media", {"type": "MOVIE", "title": "X", "creator": "Y"}
        )
        self.assertEqual(response.status_code, 401)

    def test_submission_validation(self):
        """Missing required fields are 400."""
        response = self.send_as("POST", self.user, "media", {"type": "MOVIE"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "Invalid input")

    def test_hidden_entry_is_not_found(self):
        """Another user's pending entry is 404."""
        pending = MediaFactory.create_pending(UserFactory.create())
        response = self.get_as(self.user, f"media/{pending.media_id}")
        self.assertEqual(response.status_code, 404)

    def test_unknown_entry(self):
        """Missing entries are 404 with the error body."""
        response = self.get_as(None, f"media/{uuid4()}")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Not found"})

    def test_reviews(self):
        """Reviews are created by users and read by anyone."""
        response = self.send_as(
            "POST",
            self.user,
            f"media/{self.media.media_id}/reviews",
            {"rating": 4, "body": "Moving"},
        )
        self.assertEqual(response.status_code, 201)

        listing = self.get_as(None, f"media/{self.media.media_id}/reviews").json()
        self.assertEqual(listing["averageRating"], 4.0)
        self.assertEqual(listing["reviews"][0]["user"]["userId"], str(self.user.user_id))

    def test_rating_out_of_range(self):
        """Ratings outside 1..5 are rejected."""
        response = self.send_as(
            "POST", self.user, f"media/{self.media.media_id}/reviews", {"rating": 6}
        )
        self.assertEqual(response.status_code, 400)

    def test_comments(self):
        """Comments can be posted and edited by their author."""
        response = self.send_as(
            "POST",
            self.user,
            f"media/{self.media.media_id}/comments",
            {"body": "Great ending"},
        )
        self.assertEqual(response.status_code, 201)
        comment_id = response.json()["commentId"]

        response = self.send_as(
            "PATCH",
            UserFactory.create(),
            f"media/{self.media.media_id}/comments/{comment_id}",
            {"body": "Hijacked"},
        )
        self.assertEqual(response.status_code, 403)

    def test_empty_comment(self):
        """Blank comments are rejected."""
        response = self.send_as(
            "POST", self.user, f"media/{self.media.media_id}/comments", {"body": "   "}
        )
        self.assertEqual(response.status_code, 400)
