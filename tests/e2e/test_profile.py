"""End-to-end tests for profiles and account deletion."""

from uuid import uuid4

from tests.conftest import auth_headers, register
from tests.harness import create_client_fixture

client = create_client_fixture()

PROFILE = {"status": "Developer", "skills": "python, fastapi ,sql"}


def upsert(client, token: str, body: dict | None = None) -> dict:
    response = client.post(
        "/api/profile", json=body or PROFILE, headers=auth_headers(token)
    )
    assert response.status_code == 200, response.text
    return response.json()


class TestUpsertProfile:
    """Tests for POST /api/profile."""

    def test_create_parses_skills(self, client):
        token = register(client, "Ann")

        profile = upsert(client, token)

        assert profile["skills"] == ["python", "fastapi", "sql"]
        assert profile["user"]["name"] == "Ann"

    def test_second_upsert_updates_same_profile(self, client):
        token = register(client, "Ann")
        first = upsert(client, token, {**PROFILE, "company": "Acme", "twitter": "t"})

        second = upsert(
            client, token, {"status": "Lead", "skills": "go", "youtube": "y"}
        )

        assert second["id"] == first["id"]
        assert second["status"] == "Lead"
        assert second["company"] == "Acme"
        assert second["social"] == {"twitter": "t", "youtube": "y"}
        assert len(client.get("/api/profile").json()) == 1

    def test_status_and_skills_required(self, client):
        token = register(client, "Ann")

        response = client.post(
            "/api/profile", json={"company": "Acme"}, headers=auth_headers(token)
        )

        assert response.status_code == 400
        params = [e["param"] for e in response.json()["errors"]]
        assert params == ["status", "skills"]

    def test_blank_skills_reported_with_missing_status(self, client):
        """Every failing field should come back in one response."""
        token = register(client, "Ann")

        response = client.post(
            "/api/profile", json={"skills": ""}, headers=auth_headers(token)
        )

        assert response.status_code == 400
        params = sorted(e["param"] for e in response.json()["errors"])
        assert params == ["skills", "status"]

    def test_blank_skills_on_update_rejected(self, client):
        token = register(client, "Ann")
        upsert(client, token)

        response = client.post(
            "/api/profile",
            json={"status": "Lead", "skills": " , "},
            headers=auth_headers(token),
        )

        assert response.status_code == 400
        assert [e["param"] for e in response.json()["errors"]] == ["skills"]


    def test_github_username_alias(self, client):
        token = register(client, "Ann")

        profile = upsert(client, token, {**PROFILE, "githubusername": "ann"})

        assert profile["github_username"] == "ann"


class TestReadProfile:
    """Tests for reading profiles."""

    def test_me_without_profile(self, client):
        token = register(client, "Ann")

        response = client.get("/api/profile/me", headers=auth_headers(token))

        assert response.status_code == 400
        assert response.json()["detail"] == "There is no profile for this user"

    def test_by_user(self, client):
        token = register(client, "Ann")
        user_id = client.get("/api/auth", headers=auth_headers(token)).json()["id"]
        created = upsert(client, token)

        response = client.get(f"/api/profile/user/{user_id}")

        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    def test_by_unknown_or_malformed_user(self, client):
        assert client.get(f"/api/profile/user/{uuid4()}").status_code == 404
        assert client.get("/api/profile/user/not-a-uuid").status_code == 404


class TestExperienceAndEducation:
    """Tests for the experience and education routes."""

    def test_experience_most_recent_first(self, client):
        token = register(client, "Ann")
        upsert(client, token)

        for title in ("Junior", "Senior"):
            response = client.put(
                "/api/profile/experience",
                json={"title": title, "company": "Acme", "from": "2020-01-01"},
                headers=auth_headers(token),
            )
            assert response.status_code == 200

        assert [e["title"] for e in response.json()["experience"]] == [
            "Senior",
            "Junior",
        ]

    def test_experience_requires_fields(self, client):
        token = register(client, "Ann")
        upsert(client, token)

        response = client.put(
            "/api/profile/experience", json={}, headers=auth_headers(token)
        )

        assert response.status_code == 400
        params = {e["param"] for e in response.json()["errors"]}
        assert params == {"title", "company", "from"}

    def test_delete_unknown_experience_is_noop(self, client):
        token = register(client, "Ann")
        upsert(client, token)
        before = client.put(
            "/api/profile/experience",
            json={"title": "Engineer", "company": "Acme", "from": "2020-01-01"},
            headers=auth_headers(token),
        ).json()

        response = client.delete(
            f"/api/profile/experience/{uuid4()}", headers=auth_headers(token)
        )

        assert response.status_code == 200
        assert response.json()["experience"] == before["experience"]

    def test_education_add_and_delete(self, client):
        token = register(client, "Ann")
        upsert(client, token)
        profile = client.put(
            "/api/profile/education",
            json={
                "school": "MIT",
                "degree": "BSc",
                "fieldofstudy": "CS",
                "from": "2015-09-01",
                "to": "2019-06-30",
            },
            headers=auth_headers(token),
        ).json()
        assert profile["education"][0]["from"] == "2015-09-01"
        education_id = profile["education"][0]["id"]

        response = client.delete(
            f"/api/profile/education/{education_id}", headers=auth_headers(token)
        )

        assert response.status_code == 200
        assert response.json()["education"] == []

    def test_dates_use_request_keys(self, client):
        token = register(client, "Ann")
        upsert(client, token)

        profile = client.put(
            "/api/profile/experience",
            json={
                "title": "Engineer",
                "company": "Acme",
                "from": "2020-01-01",
                "to": "2021-06-30",
            },
            headers=auth_headers(token),
        ).json()

        experience = profile["experience"][0]
        assert experience["from"] == "2020-01-01"
        assert experience["to"] == "2021-06-30"
        assert "from_date" not in experience
        assert "to_date" not in experience


    def test_edits_need_a_profile(self, client):
        token = register(client, "Ann")

        response = client.put(
            "/api/profile/experience",
            json={"title": "Engineer", "company": "Acme", "from": "2020-01-01"},
            headers=auth_headers(token),
        )

        assert response.status_code == 400


class TestDeleteAccount:
    """Tests for DELETE /api/profile."""

    def test_deletes_profile_posts_and_user(self, client):
        ann, bob = register(client, "Ann"), register(client, "Bob")
        upsert(client, ann)
        client.post("/api/posts", json={"text": "Ann's"}, headers=auth_headers(ann))
        bobs = client.post(
            "/api/posts", json={"text": "Bob's"}, headers=auth_headers(bob)
        ).json()
        client.post(
            f"/api/posts/comment/{bobs['id']}",
            json={"text": "From Ann"},
            headers=auth_headers(ann),
        )

        response = client.delete("/api/profile", headers=auth_headers(ann))
        assert response.status_code == 200
        assert response.json()["msg"] == "User deleted"

        assert client.get("/api/profile").json() == []
        posts = client.get("/api/posts", headers=auth_headers(bob)).json()
        assert [p["id"] for p in posts] == [bobs["id"]]
        assert [c["text"] for c in posts[0]["comments"]] == ["From Ann"]
        login = client.post(
            "/api/auth", json={"email": "ann@example.com", "password": "secret1"}
        )
        assert login.status_code == 400


class TestGitHub:
    """Tests for the repository listing proxy."""

    def test_lists_repositories(self, client):
        response = client.get("/api/profile/github/ann")

        assert response.status_code == 200
        assert [r["name"] for r in response.json()] == [
            "ann-project-2",
            "ann-project-1",
        ]

    def test_unknown_github_user(self, client):
        assert client.get("/api/profile/github/ghost").status_code == 404
