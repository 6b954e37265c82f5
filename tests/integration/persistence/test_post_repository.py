"""Integration tests for the PostgreSQL post and profile repositories.

Requires a reachable PostgreSQL instance named by DATABASE__URL.
"""

import os
from datetime import datetime
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine

from devconnector.domain.model import Comment, Like
from devconnector.domain.repository import (
    PostRepository,
    ProfileRepository,
    UserRepository,
)
from devconnector.domain.value import CommentId
from devconnector.persistence.tables import metadata
from tests.conftest import (
    make_experience,
    make_post,
    make_profile,
    make_user,
)
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("DATABASE__URL"), reason="DATABASE__URL not set"
)

integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def env(integration_env):
    engine = await integration_env.get(AsyncEngine)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
        await conn.run_sync(metadata.create_all)
    return integration_env


class TestPostgresPostRepository:
    """Sub-collection rows of posts."""

    @pytest.mark.asyncio
    async def test_likes_and_comments_most_recent_first(self, env):
        user_repo = await env.get(UserRepository)
        post_repo = await env.get(PostRepository)
        author, fan = make_user("Ann"), make_user("Bob")
        await user_repo.save(author)
        await user_repo.save(fan)
        post = await post_repo.save(make_post(author))

        await post_repo.add_like(post.id, Like(user_id=fan.id))
        await post_repo.add_like(post.id, Like(user_id=author.id))
        for text in ("A", "B"):
            await post_repo.add_comment(
                post.id,
                Comment(
                    id=CommentId(uuid4()),
                    user_id=fan.id,
                    text=text,
                    name=fan.name,
                    created_at=datetime.now(),
                ),
            )

        stored = await post_repo.find_by_id(post.id)

        assert [like.user_id for like in stored.likes] == [author.id, fan.id]
        assert [c.text for c in stored.comments] == ["B", "A"]

    @pytest.mark.asyncio
    async def test_duplicate_like_hits_unique_constraint(self, env):
        user_repo = await env.get(UserRepository)
        post_repo = await env.get(PostRepository)
        author = make_user()
        await user_repo.save(author)
        post = await post_repo.save(make_post(author))
        await post_repo.add_like(post.id, Like(user_id=author.id))

        with pytest.raises(IntegrityError):
            await post_repo.add_like(post.id, Like(user_id=author.id))

        stored = await post_repo.find_by_id(post.id)
        assert len(stored.likes) == 1


class TestPostgresProfileRepository:
    """Profiles and their entries."""

    @pytest.mark.asyncio
    async def test_one_profile_per_user(self, env):
        user_repo = await env.get(UserRepository)
        profile_repo = await env.get(ProfileRepository)
        user = make_user()
        await user_repo.save(user)
        await profile_repo.save(make_profile(user))

        with pytest.raises(IntegrityError):
            await profile_repo.save(make_profile(user, status="Other"))

    @pytest.mark.asyncio
    async def test_update_fields_and_experience(self, env):
        user_repo = await env.get(UserRepository)
        profile_repo = await env.get(ProfileRepository)
        user = make_user()
        await user_repo.save(user)
        profile = await profile_repo.save(make_profile(user))
        junior, senior = make_experience("Junior"), make_experience("Senior")
        await profile_repo.add_experience(profile.id, junior)
        await profile_repo.add_experience(profile.id, senior)

        updated = await profile_repo.update_fields(user.id, {"company": "Acme"})

        assert updated.company == "Acme"
        assert [e.title for e in updated.experience] == ["Senior", "Junior"]
        assert await profile_repo.remove_experience(profile.id, junior.id)
        assert not await profile_repo.remove_experience(profile.id, junior.id)
