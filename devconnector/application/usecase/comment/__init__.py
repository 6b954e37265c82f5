"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase, CommentsResponse
from .remove_comment import RemoveCommentRequest, RemoveCommentUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentsResponse",
    "RemoveCommentRequest",
    "RemoveCommentUseCase",
]
