"""Delete post use case."""

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase, MessageResponse
from devconnector.domain.service import PostService
from devconnector.domain.value import PostId, Principal, parse_id


class DeletePostRequest(BaseModel):
    """Delete post request."""

    principal: Principal
    post_id: str


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting one of the caller's posts."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> MessageResponse:
        """Delete a post.

        Raises:
            NotFoundError: If the id is malformed or no such post exists
            UnauthorizedError: If the caller is not the author
        """
        post_id = parse_id(request.post_id, PostId, "Post")
        await self.post_service.delete_post(post_id, request.principal)
        return MessageResponse(msg="Post removed")
