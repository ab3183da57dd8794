"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentThreadRequest,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
)
from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.service import JWTService

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to create comments",
        )

    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            content=request.content.strip(),
            author_id=user_id,
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except ValueError as e:
        logfire.warn("Comment creation failed", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{post_id}/comments", response_model=GetCommentThreadResponse)
async def get_comments(
    post_id: str,
    get_comment_thread_use_case: FromDishka[GetCommentThreadUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetCommentThreadResponse:
    """Get the comments of a post as a nested thread.

    Replies are nested under their parent comment. If authenticated, each
    comment says whether the viewer may reply to it or delete it.

    Args:
        post_id: Post UUID
        get_comment_thread_use_case: Get comment thread use case from DI
        auth_token: JWT token from cookie (optional)

    Returns:
        Rendered thread and total comment count
    """
    try:
        request = GetCommentThreadRequest(post_id=post_id, auth_token=auth_token)
        return await get_comment_thread_use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete(
    "/{post_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment.

    Only the comment author can delete it.

    Args:
        post_id: Post UUID
        comment_id: Comment UUID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Deletion confirmation

    Raises:
        HTTPException: If not authenticated, not authorized, or not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete comments",
        )

    try:
        use_case_request = DeleteCommentRequest(
            comment_id=comment_id,
            post_id=post_id,
            user_id=user_id,
        )
        return await delete_comment_use_case.execute(use_case_request)

    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment deletion attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        logfire.warn("Comment deletion validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error deleting comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        )
