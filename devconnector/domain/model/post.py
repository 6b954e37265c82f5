"""Post aggregate root.

A post owns two prepend-ordered sub-collections: likes (at most one per
user) and comments. Author name and avatar are snapshotted at creation
time on the post and on every comment.
"""

from datetime import datetime

from pydantic import Field

from devconnector.domain.model.common import DomainModel
from devconnector.domain.value import CommentId, OrderedItems, PostId, UserId


class Like(DomainModel):
    """A user's like on a post. Identified by the liking user."""

    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)


class Comment(DomainModel):
    """Comment left on a post."""

    id: CommentId
    user_id: UserId
    text: str = Field(min_length=1, max_length=10000)
    name: str
    avatar_url: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def owner_id(self) -> UserId:
        return self.user_id


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    author_id: UserId
    text: str = Field(min_length=1, max_length=10000)
    name: str
    avatar_url: str | None = None
    likes: OrderedItems[Like] = Field(default_factory=OrderedItems[Like])
    comments: OrderedItems[Comment] = Field(default_factory=OrderedItems[Comment])
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def owner_id(self) -> UserId:
        return self.author_id

    def liked_by(self, user_id: UserId) -> bool:
        return self.likes.contains(lambda like: like.user_id == user_id)

    def find_comment(self, comment_id: CommentId) -> Comment | None:
        return self.comments.find(lambda comment: comment.id == comment_id)
