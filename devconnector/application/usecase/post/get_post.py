"""Get post use case."""

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.post.view import PostView
from devconnector.domain.service import PostService
from devconnector.domain.value import PostId, Principal, parse_id


class GetPostRequest(BaseModel):
    """Get post request."""

    principal: Principal
    post_id: str


class GetPostUseCase(BaseUseCase):
    """Use case for loading a single post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Load a post.

        Raises:
            NotFoundError: If the id is malformed or no such post exists
        """
        post_id = parse_id(request.post_id, PostId, "Post")
        post = await self.post_service.get_post(post_id)
        return PostView.from_post(post)
