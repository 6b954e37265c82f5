"""Post, like and comment routes.

Every route requires authentication.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from devconnector.application.usecase.base import MessageResponse
from devconnector.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
)
from devconnector.application.usecase.like import (
    LikePostRequest,
    LikePostUseCase,
    UnlikePostUseCase,
)
from devconnector.application.usecase.post import (
    CommentView,
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    LikeView,
    ListPostsRequest,
    ListPostsUseCase,
    PostView,
)
from devconnector.interface.api.pipeline import Authenticated

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)


class TextAPIRequest(BaseModel):
    """API request body for a post or comment."""

    text: str = ""


@router.post("", response_model=PostView)
async def create_post(
    request: TextAPIRequest,
    context: Authenticated,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> PostView:
    """Publish a post under the caller's current name and avatar."""
    return await create_post_use_case.execute(
        CreatePostRequest(principal=context.principal, text=request.text)
    )


@router.get("", response_model=list[PostView])
async def list_posts(
    context: Authenticated,
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostView]:
    """List every post, newest first."""
    result = await list_posts_use_case.execute(
        ListPostsRequest(principal=context.principal)
    )
    return result.posts


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    context: Authenticated,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostView:
    return await get_post_use_case.execute(
        GetPostRequest(principal=context.principal, post_id=post_id)
    )


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    context: Authenticated,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> MessageResponse:
    """Delete a post. Only its author may do so."""
    return await delete_post_use_case.execute(
        DeletePostRequest(principal=context.principal, post_id=post_id)
    )


@router.put("/like/{post_id}", response_model=list[LikeView])
async def like_post(
    post_id: str,
    context: Authenticated,
    like_post_use_case: FromDishka[LikePostUseCase],
) -> list[LikeView]:
    """Like a post.

    Returns:
        The post's likes after the change, most recent first
    """
    result = await like_post_use_case.execute(
        LikePostRequest(principal=context.principal, post_id=post_id)
    )
    return result.likes


@router.put("/unlike/{post_id}", response_model=list[LikeView])
async def unlike_post(
    post_id: str,
    context: Authenticated,
    unlike_post_use_case: FromDishka[UnlikePostUseCase],
) -> list[LikeView]:
    """Withdraw the caller's like from a post."""
    result = await unlike_post_use_case.execute(
        LikePostRequest(principal=context.principal, post_id=post_id)
    )
    return result.likes


@router.post("/comment/{post_id}", response_model=list[CommentView])
async def add_comment(
    post_id: str,
    request: TextAPIRequest,
    context: Authenticated,
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> list[CommentView]:
    """Comment on a post.

    Returns:
        The post's comments after the change, most recent first
    """
    result = await add_comment_use_case.execute(
        AddCommentRequest(
            principal=context.principal, post_id=post_id, text=request.text
        )
    )
    return result.comments


@router.delete("/comment/{post_id}/{comment_id}", response_model=list[CommentView])
async def remove_comment(
    post_id: str,
    comment_id: str,
    context: Authenticated,
    remove_comment_use_case: FromDishka[RemoveCommentUseCase],
) -> list[CommentView]:
    """Delete a comment. Only its author may do so."""
    result = await remove_comment_use_case.execute(
        RemoveCommentRequest(
            principal=context.principal, post_id=post_id, comment_id=comment_id
        )
    )
    return result.comments
