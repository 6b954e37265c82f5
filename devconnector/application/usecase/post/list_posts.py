"""List posts use case."""

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.post.view import PostView
from devconnector.domain.service import PostService
from devconnector.domain.value import Principal


class ListPostsRequest(BaseModel):
    """List posts request."""

    principal: Principal


class ListPostsResponse(BaseModel):
    """All posts, newest first."""

    posts: list[PostView]


class ListPostsUseCase(BaseUseCase):
    """Use case for listing every post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        posts = await self.post_service.list_posts()
        return ListPostsResponse(posts=[PostView.from_post(p) for p in posts])
