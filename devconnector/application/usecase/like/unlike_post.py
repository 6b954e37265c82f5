"""Unlike post use case."""

from devconnector.application.usecase.base import BaseUseCase
from devconnector.application.usecase.like.like_post import (
    LikePostRequest,
    LikesResponse,
)
from devconnector.application.usecase.post.view import LikeView
from devconnector.domain.service import PostService
from devconnector.domain.value import PostId, parse_id


class UnlikePostUseCase(BaseUseCase):
    """Use case for withdrawing a like."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize unlike post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> LikesResponse:
        """Unlike a post.

        Raises:
            NotFoundError: If the id is malformed or no such post exists
            NotLikedError: If the caller does not like the post
        """
        post_id = parse_id(request.post_id, PostId, "Post")
        post = await self.post_service.unlike(post_id, request.principal)
        return LikesResponse(likes=[LikeView.from_like(like) for like in post.likes])
