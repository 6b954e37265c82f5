"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from devconnector.domain.error import (
    AlreadyLikedError,
    FieldError,
    NotFoundError,
    ValidationError,
)
from devconnector.domain.model import Comment, Post, User
from devconnector.domain.repository import PostRepository
from devconnector.domain.value import CommentId, PostId, Principal

from . import aggregate_mutator
from .base import Service
from .ownership_policy import require_owner


class PostService(Service):
    """Domain service for posts and their likes and comments.

    Sub-item edits check their precondition against the loaded post, then
    write through the repository's single-item primitives and re-read.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(self, author: User, text: str) -> Post:
        """Publish a post, snapshotting the author's name and avatar.

        Raises:
            ValidationError: If text is empty
        """
        with logfire.span("post_service.create_post", user_id=str(author.id)):
            if not text or not text.strip():
                raise ValidationError([FieldError("text", "Text is required")])
            post = Post(
                id=PostId(uuid4()),
                author_id=author.id,
                text=text,
                name=author.name,
                avatar_url=author.avatar_url,
                created_at=datetime.now(),
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def list_posts(self) -> list[Post]:
        """All posts, newest first."""
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def delete_post(self, post_id: PostId, principal: Principal) -> None:
        """Delete one of principal's posts.

        Raises:
            NotFoundError: If the post does not exist
            UnauthorizedError: If principal is not the author
        """
        with logfire.span(
            "post_service.delete_post",
            post_id=str(post_id),
            user_id=str(principal.id),
        ):
            post = await self.get_post(post_id)
            require_owner(principal, post, "post")
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

    async def like(self, post_id: PostId, principal: Principal) -> Post:
        """Like a post.

        Raises:
            NotFoundError: If the post does not exist
            AlreadyLikedError: If principal already likes the post
        """
        with logfire.span(
            "post_service.like", post_id=str(post_id), user_id=str(principal.id)
        ):
            post = await self.get_post(post_id)
            liked = aggregate_mutator.add_like(post, principal)
            like = liked.likes[0]

            try:
                await self.post_repository.add_like(post_id, like)
            except IntegrityError:
                logfire.warn(
                    "Duplicate like attempt",
                    post_id=str(post_id),
                    user_id=str(principal.id),
                )
                raise AlreadyLikedError()

            logfire.info("Post liked", post_id=str(post_id), user_id=str(principal.id))
            return await self.get_post(post_id)

    async def unlike(self, post_id: PostId, principal: Principal) -> Post:
        """Withdraw principal's like.

        Raises:
            NotFoundError: If the post does not exist
            NotLikedError: If principal does not like the post
        """
        with logfire.span(
            "post_service.unlike", post_id=str(post_id), user_id=str(principal.id)
        ):
            post = await self.get_post(post_id)
            aggregate_mutator.remove_like(post, principal)
            await self.post_repository.remove_like(post_id, principal.id)
            logfire.info(
                "Post unliked", post_id=str(post_id), user_id=str(principal.id)
            )
            return await self.get_post(post_id)

    async def add_comment(self, post_id: PostId, author: User, text: str) -> Post:
        """Comment on a post.

        Raises:
            NotFoundError: If the post does not exist
            ValidationError: If text is empty
        """
        with logfire.span(
            "post_service.add_comment", post_id=str(post_id), user_id=str(author.id)
        ):
            post = await self.get_post(post_id)
            commented = aggregate_mutator.add_comment(post, author, text)
            comment: Comment = commented.comments[0]

            try:
                await self.post_repository.add_comment(post_id, comment)
            except IntegrityError:
                logfire.warn("Post deleted before comment", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info(
                "Comment added", post_id=str(post_id), comment_id=str(comment.id)
            )
            return await self.get_post(post_id)

    async def remove_comment(
        self, post_id: PostId, comment_id: CommentId, principal: Principal
    ) -> Post:
        """Delete one of principal's comments.

        Raises:
            NotFoundError: If the post or the comment does not exist
            UnauthorizedError: If principal did not write the comment
        """
        with logfire.span(
            "post_service.remove_comment",
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=str(principal.id),
        ):
            post = await self.get_post(post_id)
            aggregate_mutator.remove_comment(post, principal, comment_id)
            await self.post_repository.remove_comment(post_id, comment_id)
            logfire.info(
                "Comment removed", post_id=str(post_id), comment_id=str(comment_id)
            )
            return await self.get_post(post_id)
