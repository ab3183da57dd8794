"""Get comment thread use case."""

from uuid import UUID

from pydantic import BaseModel

from forum.application.thread import CommentThread
from forum.application.view import RenderedComment
from forum.config import CommentSettings
from forum.domain.service import CommentService, JWTService
from forum.domain.value import PostId


class GetCommentThreadRequest(BaseModel):
    """Get comment thread request."""

    post_id: str  # UUID string
    auth_token: str | None = None  # JWT token for authentication (optional)


class GetCommentThreadResponse(BaseModel):
    """Get comment thread response."""

    post_id: str
    comments: list[RenderedComment]
    total: int


class GetCommentThreadUseCase:
    """Use case for getting the comments of a post as a rendered thread."""

    def __init__(
        self,
        comment_service: CommentService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get comment thread use case.

        Args:
            comment_service: Comment domain service
            jwt_service: JWT service for identifying the viewer
            comment_settings: Reply depth and indentation settings
        """
        self.comment_service = comment_service
        self.jwt_service = jwt_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetCommentThreadRequest) -> GetCommentThreadResponse:
        """Execute get comment thread flow.

        Steps:
        1. Identify the viewer from the token (anonymous if missing/invalid)
        2. Fetch the flat comment list and build the reply forest
        3. Render the forest with the viewer's reply/delete permissions

        A failed fetch yields an empty thread, not an error.

        Args:
            request: Post ID and optional auth token

        Returns:
            Rendered thread and total comment count
        """
        thread = CommentThread(
            post_id=PostId(UUID(request.post_id)),
            comment_service=self.comment_service,
            viewer=self.jwt_service.current_viewer(request.auth_token),
            max_reply_depth=self.comment_settings.max_reply_depth,
            indent_step=self.comment_settings.indent_step,
        )
        await thread.refresh()

        return GetCommentThreadResponse(
            post_id=request.post_id,
            comments=thread.render(),
            total=thread.total_comments,
        )
