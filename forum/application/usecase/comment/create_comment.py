"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from forum.config import CommentSettings
from forum.domain.service import CommentService
from forum.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    post_id: str
    author_id: str
    content: str
    parent_id: str | None
    created_at: datetime


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            comment_settings: Reply depth settings
        """
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            ValueError: If an ID is malformed, the parent comment is invalid
                or the parent is too deep to be replied to
        """
        parent_comment_id = (
            CommentId(UUID(request.parent_id)) if request.parent_id else None
        )
        if parent_comment_id is not None:
            depth = await self.comment_service.get_comment_depth(parent_comment_id)
            if depth >= self.comment_settings.max_reply_depth:
                raise ValueError("Replies are not allowed at this depth")
        comment = await self.comment_service.create_comment(
            content=request.content,
            post_id=PostId(UUID(request.post_id)),
            author_id=UserId(UUID(request.author_id)),
            parent_id=parent_comment_id,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
        )
