"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from devconnector.domain.error import (
    AlreadyLikedError,
    NotFoundError,
    NotLikedError,
    UnauthorizedError,
    ValidationError,
)
from devconnector.domain.repository import PostRepository
from devconnector.domain.service import PostService
from devconnector.domain.value import CommentId, PostId
from devconnector.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import make_user, principal_of
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_snapshots_author(self, unit_env):
        """A new post should carry the author's name and avatar."""
        post_service = await unit_env.get(PostService)
        author = make_user("Ann")

        post = await post_service.create_post(author, "Hello")

        assert post.author_id == author.id
        assert post.name == "Ann"
        assert post.avatar_url == author.avatar_url
        assert len(post.likes) == 0
        assert len(post.comments) == 0

    @pytest.mark.asyncio
    async def test_empty_text_rejected(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError):
            await post_service.create_post(make_user(), "  ")

    @pytest.mark.asyncio
    async def test_list_newest_first(self, unit_env):
        post_service = await unit_env.get(PostService)
        author = make_user()
        first = await post_service.create_post(author, "first")
        second = await post_service.create_post(author, "second")

        posts = await post_service.list_posts()

        assert [p.id for p in posts] == [second.id, first.id]


class TestDeletePost:
    """Tests for delete_post."""

    @pytest.mark.asyncio
    async def test_owner_deletes(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user()
        post = await post_service.create_post(author, "Hello")

        await post_service.delete_post(post.id, principal_of(author))

        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_non_owner_rejected(self, unit_env):
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_service.create_post(make_user("Ann"), "Hello")

        with pytest.raises(UnauthorizedError):
            await post_service.delete_post(post.id, principal_of(make_user("Bob")))

        assert await post_repo.find_by_id(post.id) is not None

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.delete_post(PostId(uuid4()), principal_of(make_user()))


class TestLikes:
    """Tests for like and unlike."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env):
        post_service = await unit_env.get(PostService)
        author, fan = make_user("Ann"), make_user("Bob")
        post = await post_service.create_post(author, "Hello")

        liked = await post_service.like(post.id, principal_of(fan))
        assert [like.user_id for like in liked.likes] == [fan.id]

        unliked = await post_service.unlike(post.id, principal_of(fan))
        assert len(unliked.likes) == 0

    @pytest.mark.asyncio
    async def test_like_order_most_recent_first(self, unit_env):
        post_service = await unit_env.get(PostService)
        author, p1, p2 = make_user("Ann"), make_user("Bob"), make_user("Cat")
        post = await post_service.create_post(author, "Hello")

        await post_service.like(post.id, principal_of(p1))
        result = await post_service.like(post.id, principal_of(p2))

        assert [like.user_id for like in result.likes] == [p2.id, p1.id]

    @pytest.mark.asyncio
    async def test_double_like_rejected(self, unit_env):
        post_service = await unit_env.get(PostService)
        author = make_user()
        post = await post_service.create_post(author, "Hello")
        await post_service.like(post.id, principal_of(author))

        with pytest.raises(AlreadyLikedError):
            await post_service.like(post.id, principal_of(author))

        stored = await post_service.get_post(post.id)
        assert len(stored.likes) == 1

    @pytest.mark.asyncio
    async def test_unlike_without_like_rejected(self, unit_env):
        post_service = await unit_env.get(PostService)
        author = make_user()
        post = await post_service.create_post(author, "Hello")

        with pytest.raises(NotLikedError):
            await post_service.unlike(post.id, principal_of(author))

    @pytest.mark.asyncio
    async def test_like_unknown_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.like(PostId(uuid4()), principal_of(make_user()))


class TestComments:
    """Tests for add_comment and remove_comment."""

    @pytest.mark.asyncio
    async def test_comments_most_recent_first(self, unit_env):
        post_service = await unit_env.get(PostService)
        author = make_user()
        post = await post_service.create_post(author, "Hello")

        await post_service.add_comment(post.id, author, "A")
        result = await post_service.add_comment(post.id, author, "B")

        assert [c.text for c in result.comments] == ["B", "A"]

    @pytest.mark.asyncio
    async def test_remove_own_comment(self, unit_env):
        post_service = await unit_env.get(PostService)
        author, commenter = make_user("Ann"), make_user("Bob")
        post = await post_service.create_post(author, "Hello")
        commented = await post_service.add_comment(post.id, commenter, "A")

        result = await post_service.remove_comment(
            post.id, commented.comments[0].id, principal_of(commenter)
        )

        assert len(result.comments) == 0

    @pytest.mark.asyncio
    async def test_remove_other_users_comment_rejected(self, unit_env):
        post_service = await unit_env.get(PostService)
        author, commenter = make_user("Ann"), make_user("Bob")
        post = await post_service.create_post(author, "Hello")
        commented = await post_service.add_comment(post.id, commenter, "A")

        with pytest.raises(UnauthorizedError):
            await post_service.remove_comment(
                post.id, commented.comments[0].id, principal_of(author)
            )

        stored = await post_service.get_post(post.id)
        assert len(stored.comments) == 1

    @pytest.mark.asyncio
    async def test_remove_unknown_comment(self, unit_env):
        post_service = await unit_env.get(PostService)
        author = make_user()
        post = await post_service.create_post(author, "Hello")

        with pytest.raises(NotFoundError):
            await post_service.remove_comment(
                post.id, CommentId(uuid4()), principal_of(author)
            )

    @pytest.mark.asyncio
    async def test_comment_on_post_deleted_meanwhile(self):
        """A post removed between load and insert should surface as not found."""
        author = make_user()

        class VanishingPostRepository(InMemoryPostRepository):
            async def add_comment(self, post_id, comment):
                await self.delete(post_id)
                await super().add_comment(post_id, comment)

        post_service = PostService(post_repository=VanishingPostRepository())
        post = await post_service.create_post(author, "Hello")

        with pytest.raises(NotFoundError):
            await post_service.add_comment(post.id, author, "A")

        assert await post_service.post_repository.find_by_id(post.id) is None
