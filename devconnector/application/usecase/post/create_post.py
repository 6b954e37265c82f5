"""Create post use case."""

import logfire
from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.post.view import PostView
from devconnector.domain.service import PostService, UserService
from devconnector.domain.value import Principal


class CreatePostRequest(BaseModel):
    """Create post request."""

    principal: Principal
    text: str


class CreatePostUseCase(BaseUseCase):
    """Use case for publishing a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Steps:
        1. Load the author to snapshot name and avatar (via UserService)
        2. Create and save the post (via PostService)

        Raises:
            NotFoundError: If the author no longer exists
            ValidationError: If text is empty
        """
        with logfire.span("create_post.execute", user_id=str(request.principal.id)):
            author = await self.user_service.get_by_id(request.principal.id)
            post = await self.post_service.create_post(author, request.text)
            return PostView.from_post(post)
