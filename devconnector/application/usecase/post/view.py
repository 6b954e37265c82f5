"""Response shapes shared by the post, like and comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from devconnector.domain.model import Comment, Like, Post


class LikeView(BaseModel):
    """A like, identified by the liking user."""

    user: str
    created_at: datetime

    @classmethod
    def from_like(cls, like: Like) -> "LikeView":
        return cls(user=str(like.user_id), created_at=like.created_at)


class CommentView(BaseModel):
    """A comment with its author snapshot."""

    id: str
    user: str
    text: str
    name: str
    avatar: str | None
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        return cls(
            id=str(comment.id),
            user=str(comment.user_id),
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar_url,
            created_at=comment.created_at,
        )


class PostView(BaseModel):
    """A post with likes and comments, most recent first."""

    id: str
    user: str
    text: str
    name: str
    avatar: str | None
    likes: list[LikeView]
    comments: list[CommentView]
    created_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostView":
        return cls(
            id=str(post.id),
            user=str(post.author_id),
            text=post.text,
            name=post.name,
            avatar=post.avatar_url,
            likes=[LikeView.from_like(like) for like in post.likes],
            comments=[CommentView.from_comment(c) for c in post.comments],
            created_at=post.created_at,
        )
