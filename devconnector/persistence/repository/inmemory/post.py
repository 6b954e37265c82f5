"""In-memory post repository for testing."""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from devconnector.domain.model.post import Comment, Like, Post
from devconnector.domain.repository.post import PostRepository
from devconnector.domain.value import CommentId, PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> List[Post]:
        """Find all posts, newest first."""
        return sorted(self._posts.values(), key=lambda p: p.created_at, reverse=True)

    async def save(self, post: Post) -> Post:
        """Save a new post, or update the fields of an existing one."""
        existing = self._posts.get(post.id)
        if existing:
            post = post.model_copy(
                update={"likes": existing.likes, "comments": existing.comments}
            )
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None

    async def delete_by_author(self, author_id: UserId) -> int:
        """Delete every post written by author_id."""
        doomed = [p.id for p in self._posts.values() if p.author_id == author_id]
        for post_id in doomed:
            del self._posts[post_id]
        return len(doomed)

    async def add_like(self, post_id: PostId, like: Like) -> None:
        """Prepend a like.

        Raises:
            IntegrityError: If the user already likes the post
        """
        post = self._posts[post_id]
        if post.liked_by(like.user_id):
            raise IntegrityError("Duplicate like", None, Exception())
        self._posts[post_id] = post.model_copy(
            update={"likes": post.likes.insert_front(like)}
        )

    async def remove_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove a user's like."""
        post = self._posts.get(post_id)
        if post is None or not post.liked_by(user_id):
            return False
        likes = post.likes.remove_where(lambda like: like.user_id == user_id)
        self._posts[post_id] = post.model_copy(update={"likes": likes})
        return True

    async def add_comment(self, post_id: PostId, comment: Comment) -> None:
        """Prepend a comment.

        Raises:
            IntegrityError: If the post does not exist
        """
        post = self._posts.get(post_id)
        if post is None:
            raise IntegrityError("Comment on missing post", None, Exception())
        self._posts[post_id] = post.model_copy(
            update={"comments": post.comments.insert_front(comment)}
        )

    async def remove_comment(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Remove a comment by ID."""
        post = self._posts.get(post_id)
        if post is None or post.find_comment(comment_id) is None:
            return False
        comments = post.comments.remove_where(lambda c: c.id == comment_id)
        self._posts[post_id] = post.model_copy(update={"comments": comments})
        return True
