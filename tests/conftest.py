"""Test configuration and fixtures."""

from datetime import date, datetime
from uuid import uuid4

import logfire

# Telemetry stays local during tests; must run before the app module is imported
logfire.configure(send_to_logfire=False, console=False)

from devconnector.domain.model import (  # noqa: E402
    Education,
    Experience,
    Post,
    Profile,
    User,
)
from devconnector.domain.value import (  # noqa: E402
    EducationId,
    ExperienceId,
    PostId,
    Principal,
    ProfileId,
    UserId,
)


def auth_headers(token: str) -> dict[str, str]:
    """Headers carrying a bearer token the way clients send it."""
    return {"x-auth-token": token}


def make_user(name: str = "Ann", email: str | None = None) -> User:
    """Build a user without touching a repository."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        name=name,
        email=email or f"{name.lower()}-{user_id.hex[:8]}@example.com",
        avatar_url=f"https://www.gravatar.com/avatar/{user_id.hex}",
        password_hash="not-a-real-hash",
    )


def make_post(author: User, text: str = "Hello world") -> Post:
    """Build a post written by author, with no likes or comments."""
    return Post(
        id=PostId(uuid4()),
        author_id=author.id,
        text=text,
        name=author.name,
        avatar_url=author.avatar_url,
        created_at=datetime.now(),
    )


def make_profile(user: User, status: str = "Developer") -> Profile:
    """Build a profile for user, with no experience or education."""
    return Profile(
        id=ProfileId(uuid4()),
        user_id=user.id,
        status=status,
        skills=["python"],
    )


def make_experience(title: str = "Engineer") -> Experience:
    return Experience(
        id=ExperienceId(uuid4()),
        title=title,
        company="Acme",
        from_date=date(2020, 1, 1),
    )


def make_education(school: str = "MIT") -> Education:
    return Education(
        id=EducationId(uuid4()),
        school=school,
        degree="BSc",
        fieldofstudy="Computer Science",
        from_date=date(2015, 9, 1),
        to_date=date(2019, 6, 30),
    )


def principal_of(user: User) -> Principal:
    return Principal(id=user.id)


def register(client, name: str = "Ann", password: str = "secret1") -> str:
    """Register an account through the API and return its token."""
    response = client.post(
        "/api/users",
        json={
            "name": name,
            "email": f"{name.lower()}@example.com",
            "password": password,
        },
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]
