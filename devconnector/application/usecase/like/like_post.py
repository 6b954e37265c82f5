"""Like post use case."""

from pydantic import BaseModel

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.post.view import LikeView
from devconnector.domain.service import PostService
from devconnector.domain.value import PostId, Principal, parse_id


class LikePostRequest(BaseModel):
    """Like or unlike request."""

    principal: Principal
    post_id: str


class LikesResponse(BaseModel):
    """Likes of a post after the edit, most recent first."""

    likes: list[LikeView]


class LikePostUseCase(BaseUseCase):
    """Use case for liking a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize like post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> LikesResponse:
        """Like a post.

        Raises:
            NotFoundError: If the id is malformed or no such post exists
            AlreadyLikedError: If the caller already likes the post
        """
        post_id = parse_id(request.post_id, PostId, "Post")
        post = await self.post_service.like(post_id, request.principal)
        return LikesResponse(likes=[LikeView.from_like(like) for like in post.likes])
