"""End-to-end tests over the SQL repositories and request-scoped sessions."""

from fastapi.testclient import TestClient

from tests.e2e.conftest import signup
from tests.harness import create_sql_client_fixture

# App over the production persistence provider on SQLite
sql_client = create_sql_client_fixture()


def create_post(client: TestClient) -> int:
    response = client.post("/api/posts", data={"title": "Ask HN", "content": "?"})
    assert response.status_code == 200, response.text
    return response.json()["data"]["postId"]


class TestSqlUpvotes:
    def test_toggle_by_two_users(self, sql_client: TestClient):
        """Alice upvotes twice, then Bob upvotes: one point, Bob's."""
        # Arrange
        signup(sql_client, "alice")
        post_id = create_post(sql_client)

        # Act
        first = sql_client.post(f"/api/posts/{post_id}/upvote")
        second = sql_client.post(f"/api/posts/{post_id}/upvote")
        signup(sql_client, "bob")
        third = sql_client.post(f"/api/posts/{post_id}/upvote")

        # Assert
        assert first.json()["data"] == {"count": 1, "isUpvoted": True}
        assert second.json()["data"] == {"count": 0, "isUpvoted": False}
        assert third.json()["data"] == {"count": 1, "isUpvoted": True}
        as_bob = sql_client.get(f"/api/posts/{post_id}").json()["data"]
        assert as_bob["points"] == 1
        assert as_bob["isUpvoted"] is True
        assert as_bob["author"]["username"] == "alice"


class TestSqlCommentThread:
    def test_comment_and_nested_reply(self, sql_client: TestClient):
        # Arrange
        signup(sql_client, "alice")
        post_id = create_post(sql_client)

        # Act
        c1 = sql_client.post(
            f"/api/posts/{post_id}/comment", data={"content": "First!"}
        )
        c1_id = c1.json()["data"]["id"]
        c2 = sql_client.post(f"/api/comments/{c1_id}", data={"content": "Reply"})
        c2_id = c2.json()["data"]["id"]
        c3 = sql_client.post(f"/api/comments/{c2_id}", data={"content": "Deeper"})

        # Assert
        assert [c.status_code for c in (c1, c2, c3)] == [200, 200, 200]
        assert c1.json()["data"]["depth"] == 0
        assert c2.json()["data"]["depth"] == 1
        assert c2.json()["data"]["parentCommentId"] == c1_id
        assert c3.json()["data"]["depth"] == 2
        assert c3.json()["data"]["postId"] == post_id
        post = sql_client.get(f"/api/posts/{post_id}").json()["data"]
        assert post["commentCount"] == 3
        roots = sql_client.get(
            f"/api/posts/{post_id}/comments", params={"includeChildren": "true"}
        ).json()["data"]
        assert [c["id"] for c in roots] == [c1_id]
        assert roots[0]["commentCount"] == 1
        assert [c["id"] for c in roots[0]["childComments"]] == [c2_id]

    def test_reply_to_missing_comment_leaves_counters(self, sql_client: TestClient):
        # Arrange
        signup(sql_client, "alice")
        post_id = create_post(sql_client)
        c1 = sql_client.post(f"/api/posts/{post_id}/comment", data={"content": "Root"})
        c1_id = c1.json()["data"]["id"]

        # Act
        response = sql_client.post(
            f"/api/comments/{c1_id + 100}", data={"content": "Lost reply"}
        )

        # Assert
        assert response.status_code == 404
        assert response.json()["error"] == "Comment not found"
        post = sql_client.get(f"/api/posts/{post_id}").json()["data"]
        assert post["commentCount"] == 1
        roots = sql_client.get(f"/api/posts/{post_id}/comments").json()["data"]
        assert roots[0]["commentCount"] == 0
