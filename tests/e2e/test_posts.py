"""End-to-end tests for posts, likes and comments."""

from uuid import uuid4

from tests.conftest import auth_headers, register
from tests.harness import create_client_fixture

client = create_client_fixture()


def create_post(client, token: str, text: str = "Hello") -> dict:
    response = client.post("/api/posts", json={"text": text}, headers=auth_headers(token))
    assert response.status_code == 200, response.text
    return response.json()


class TestPosts:
    """Tests for creating, reading and deleting posts."""

    def test_create_snapshots_author(self, client):
        token = register(client, "Ann")

        post = create_post(client, token)

        assert post["name"] == "Ann"
        assert post["text"] == "Hello"
        assert post["likes"] == []
        assert post["comments"] == []

    def test_empty_text_rejected(self, client):
        token = register(client, "Ann")

        response = client.post("/api/posts", json={"text": ""}, headers=auth_headers(token))

        assert response.status_code == 400
        assert response.json()["errors"][0]["param"] == "text"

    def test_list_newest_first(self, client):
        token = register(client, "Ann")
        first = create_post(client, token, "first")
        second = create_post(client, token, "second")

        response = client.get("/api/posts", headers=auth_headers(token))

        assert [p["id"] for p in response.json()] == [second["id"], first["id"]]

    def test_malformed_id_is_not_found(self, client):
        token = register(client, "Ann")

        response = client.get("/api/posts/not-a-uuid", headers=auth_headers(token))

        assert response.status_code == 404

    def test_unknown_id_is_not_found(self, client):
        token = register(client, "Ann")

        response = client.get(f"/api/posts/{uuid4()}", headers=auth_headers(token))

        assert response.status_code == 404

    def test_only_author_deletes(self, client):
        ann, bob = register(client, "Ann"), register(client, "Bob")
        post = create_post(client, ann)

        response = client.delete(f"/api/posts/{post['id']}", headers=auth_headers(bob))
        assert response.status_code == 401
        assert response.json()["reason"] == "not_owner"

        response = client.delete(f"/api/posts/{post['id']}", headers=auth_headers(ann))
        assert response.status_code == 200
        assert response.json()["msg"] == "Post removed"

        response = client.get(f"/api/posts/{post['id']}", headers=auth_headers(ann))
        assert response.status_code == 404


class TestLikes:
    """Tests for liking and unliking."""

    def test_likes_most_recent_first(self, client):
        author, p1, p2 = (register(client, n) for n in ("Ann", "Bob", "Cat"))
        post = create_post(client, author)
        p1_id = client.get("/api/auth", headers=auth_headers(p1)).json()["id"]
        p2_id = client.get("/api/auth", headers=auth_headers(p2)).json()["id"]

        client.put(f"/api/posts/like/{post['id']}", headers=auth_headers(p1))
        response = client.put(f"/api/posts/like/{post['id']}", headers=auth_headers(p2))

        assert response.status_code == 200
        assert [like["user"] for like in response.json()] == [p2_id, p1_id]

    def test_double_like_rejected(self, client):
        token = register(client, "Ann")
        post = create_post(client, token)
        client.put(f"/api/posts/like/{post['id']}", headers=auth_headers(token))

        response = client.put(f"/api/posts/like/{post['id']}", headers=auth_headers(token))

        assert response.status_code == 400
        assert response.json()["detail"] == "Post already liked"
        stored = client.get(f"/api/posts/{post['id']}", headers=auth_headers(token))
        assert len(stored.json()["likes"]) == 1

    def test_unlike(self, client):
        token = register(client, "Ann")
        post = create_post(client, token)

        response = client.put(f"/api/posts/unlike/{post['id']}", headers=auth_headers(token))
        assert response.status_code == 400
        assert response.json()["detail"] == "Post has not yet been liked"

        client.put(f"/api/posts/like/{post['id']}", headers=auth_headers(token))
        response = client.put(f"/api/posts/unlike/{post['id']}", headers=auth_headers(token))
        assert response.status_code == 200
        assert response.json() == []

    def test_like_unknown_post(self, client):
        token = register(client, "Ann")

        response = client.put(f"/api/posts/like/{uuid4()}", headers=auth_headers(token))

        assert response.status_code == 404


class TestComments:
    """Tests for commenting."""

    def test_comments_most_recent_first(self, client):
        token = register(client, "Ann")
        post = create_post(client, token)

        client.post(
            f"/api/posts/comment/{post['id']}",
            json={"text": "A"},
            headers=auth_headers(token),
        )
        response = client.post(
            f"/api/posts/comment/{post['id']}",
            json={"text": "B"},
            headers=auth_headers(token),
        )

        assert response.status_code == 200
        assert [c["text"] for c in response.json()] == ["B", "A"]
        assert response.json()[0]["name"] == "Ann"

    def test_only_comment_author_removes(self, client):
        ann, bob = register(client, "Ann"), register(client, "Bob")
        post = create_post(client, ann)
        comments = client.post(
            f"/api/posts/comment/{post['id']}",
            json={"text": "From Bob"},
            headers=auth_headers(bob),
        ).json()
        path = f"/api/posts/comment/{post['id']}/{comments[0]['id']}"

        response = client.delete(path, headers=auth_headers(ann))
        assert response.status_code == 401

        response = client.delete(path, headers=auth_headers(bob))
        assert response.status_code == 200
        assert response.json() == []

    def test_remove_unknown_comment(self, client):
        token = register(client, "Ann")
        post = create_post(client, token)

        response = client.delete(
            f"/api/posts/comment/{post['id']}/{uuid4()}", headers=auth_headers(token)
        )

        assert response.status_code == 404
