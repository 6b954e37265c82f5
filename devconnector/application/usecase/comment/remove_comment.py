"""Remove comment use case."""

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.comment.add_comment import CommentsResponse
from devconnector.application.usecase.post.view import CommentView
from devconnector.domain.service import PostService
from devconnector.domain.value import CommentId, PostId, Principal, parse_id


class RemoveCommentRequest(BaseModel):
    """Remove comment request."""

    principal: Principal
    post_id: str
    comment_id: str


class RemoveCommentUseCase(BaseUseCase):
    """Use case for deleting one of the caller's comments."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize remove comment use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: RemoveCommentRequest) -> CommentsResponse:
        """Remove a comment.

        Raises:
            NotFoundError: If either id is malformed or names nothing
            UnauthorizedError: If the caller did not write the comment
        """
        post_id = parse_id(request.post_id, PostId, "Post")
        comment_id = parse_id(request.comment_id, CommentId, "Comment")
        post = await self.post_service.remove_comment(
            post_id, comment_id, request.principal
        )
        return CommentsResponse(
            comments=[CommentView.from_comment(c) for c in post.comments]
        )
