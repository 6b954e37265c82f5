"""Add comment use case."""

import logfire
from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.post.view import CommentView
from devconnector.domain.service import PostService, UserService
from devconnector.domain.value import PostId, Principal, parse_id


class AddCommentRequest(BaseModel):
    """Add comment request."""

    principal: Principal
    post_id: str
    text: str


class CommentsResponse(BaseModel):
    """Comments of a post after the edit, most recent first."""

    comments: list[CommentView]


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize add comment use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> CommentsResponse:
        """Execute add comment flow.

        Steps:
        1. Load the commenter to snapshot name and avatar (via UserService)
        2. Prepend the comment (via PostService)

        Raises:
            NotFoundError: If the id is malformed or no such post exists
            ValidationError: If text is empty
        """
        post_id = parse_id(request.post_id, PostId, "Post")
        with logfire.span("add_comment.execute", post_id=str(post_id)):
            author = await self.user_service.get_by_id(request.principal.id)
            post = await self.post_service.add_comment(post_id, author, request.text)
            return CommentsResponse(
                comments=[CommentView.from_comment(c) for c in post.comments]
            )
