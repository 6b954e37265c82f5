"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from devconnector.domain.model.post import Comment, Like, Post
from devconnector.domain.value import CommentId, PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Posts are read whole, with likes and comments most-recent-first.
    Likes and comments are written one item at a time through the atomic
    add/remove primitives, so concurrent edits of the same post never
    overwrite each other.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post with its likes and comments if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts, newest first."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post.

        A new post is stored with its likes and comments; saving an
        existing post updates only its own fields.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post with its likes and comments.

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def delete_by_author(self, author_id: UserId) -> int:
        """Delete every post written by author_id.

        Returns:
            Number of posts deleted
        """
        pass

    @abstractmethod
    async def add_like(self, post_id: PostId, like: Like) -> None:
        """Atomically add a like in front of the post's likes.

        Raises:
            IntegrityError: If like.user_id already likes the post
        """
        pass

    @abstractmethod
    async def remove_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Atomically remove user_id's like.

        Returns:
            True if a like was removed
        """
        pass

    @abstractmethod
    async def add_comment(self, post_id: PostId, comment: Comment) -> None:
        """Atomically add a comment in front of the post's comments.

        Raises:
            IntegrityError: If the post no longer exists
        """
        pass

    @abstractmethod
    async def remove_comment(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Atomically remove a comment.

        Returns:
            True if a comment was removed
        """
        pass
