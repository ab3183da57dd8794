"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.domain.service import CommentService
from forum.domain.value import CommentId, PostId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    post_id: str  # UUID string (for validation)
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase:
    """Use case for deleting one of the user's own comments."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Args:
            request: Comment ID, post ID and the requesting user's ID

        Returns:
            Confirmation of the deletion

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user doesn't own the comment
            ValueError: If the comment belongs to another post
        """
        comment_id = CommentId(UUID(request.comment_id))
        post_id = PostId(UUID(request.post_id))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is not None and comment.post_id != post_id:
            raise ValueError(
                f"Comment {request.comment_id} does not belong to post {request.post_id}"
            )

        await self.comment_service.delete_comment(
            comment_id, UserId(UUID(request.user_id))
        )

        return DeleteCommentResponse(comment_id=request.comment_id, deleted=True)
