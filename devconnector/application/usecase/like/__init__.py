"""Like use cases."""

from .like_post import LikePostRequest, LikePostUseCase, LikesResponse
from .unlike_post import UnlikePostUseCase

__all__ = [
    "LikePostRequest",
    "LikePostUseCase",
    "LikesResponse",
    "UnlikePostUseCase",
]
