"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import Table, delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.domain.model import Comment, Like, Post
from devconnector.domain.repository import PostRepository
from devconnector.domain.value import CommentId, PostId, UserId
from devconnector.persistence.mappers import (
    comment_to_dict,
    like_to_dict,
    post_to_dict,
    row_to_post,
)
from devconnector.persistence.tables import (
    post_comments_table,
    post_likes_table,
    posts_table,
)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Likes and comments live in their own tables, one row per item.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_children(
        self, table: Table, post_ids: list[UUID]
    ) -> dict[UUID, list[dict[str, Any]]]:
        """Fetch sub-collection rows for several posts in a single query.

        Args:
            table: post_likes or post_comments
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> rows, most recent first
        """
        if not post_ids:
            return {}

        stmt = (
            select(table)
            .where(table.c.post_id.in_(post_ids))
            .order_by(desc(table.c.seq))
        )
        result = await self.session.execute(stmt)

        children: dict[UUID, list[dict[str, Any]]] = defaultdict(list)
        for row in result.mappings():
            children[row["post_id"]].append(dict(row))
        return children

    async def _hydrate(self, rows: list[dict[str, Any]]) -> List[Post]:
        post_ids = [row["id"] for row in rows]
        likes = await self._fetch_children(post_likes_table, post_ids)
        comments = await self._fetch_children(post_comments_table, post_ids)
        return [
            row_to_post(row, likes.get(row["id"], []), comments.get(row["id"], []))
            for row in rows
        ]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID with its likes and comments."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        posts = await self._hydrate([dict(row)])
        return posts[0]

    async def find_all(self) -> List[Post]:
        """Find all posts, newest first."""
        stmt = select(posts_table).order_by(desc(posts_table.c.created_at))
        result = await self.session.execute(stmt)
        rows = [dict(row) for row in result.mappings()]
        return await self._hydrate(rows)

    async def save(self, post: Post) -> Post:
        """Save a post.

        A new post is inserted together with any likes and comments it
        carries; an existing post only has its own columns updated.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        existing = await self.session.execute(
            select(posts_table.c.id).where(posts_table.c.id == post.id)
        )
        post_dict = post_to_dict(post)

        if existing.first():
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
            await self.session.execute(stmt)
        else:
            await self.session.execute(posts_table.insert().values(**post_dict))
            # Oldest first, so seq order matches the aggregate's order
            for like in reversed(post.likes.root):
                await self.session.execute(
                    post_likes_table.insert().values(**like_to_dict(post.id, like))
                )
            for comment in reversed(post.comments.root):
                await self.session.execute(
                    post_comments_table.insert().values(
                        **comment_to_dict(post.id, comment)
                    )
                )

        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post; likes and comments go with it (ON DELETE CASCADE)."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_by_author(self, author_id: UserId) -> int:
        """Delete every post written by author_id."""
        stmt = delete(posts_table).where(posts_table.c.author_id == author_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def add_like(self, post_id: PostId, like: Like) -> None:
        """Insert one like row.

        Runs in a savepoint; a duplicate hits uq_post_likes_post_user and
        raises IntegrityError without poisoning the outer transaction.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                post_likes_table.insert().values(**like_to_dict(post_id, like))
            )

    async def remove_like(self, post_id: PostId, user_id: UserId) -> bool:
        stmt = delete(post_likes_table).where(
            post_likes_table.c.post_id == post_id,
            post_likes_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def add_comment(self, post_id: PostId, comment: Comment) -> None:
        """Insert one comment row.

        Runs in a savepoint; a post deleted since it was loaded fails the
        post_id foreign key and raises IntegrityError.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                post_comments_table.insert().values(
                    **comment_to_dict(post_id, comment)
                )
            )

    async def remove_comment(self, post_id: PostId, comment_id: CommentId) -> bool:
        stmt = delete(post_comments_table).where(
            post_comments_table.c.post_id == post_id,
            post_comments_table.c.id == comment_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
