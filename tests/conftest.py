"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from forum.domain.model import Comment
from forum.domain.value import CommentId, PostId, UserId

BASE_TIME = datetime(2025, 1, 15, 10, 30)


def make_comment(
    post_id: PostId,
    parent_id: CommentId | None = None,
    author_id: UserId | None = None,
    content: str = "Test comment",
    minutes: int = 0,
    comment_id: CommentId | None = None,
) -> Comment:
    """Helper function to build comments for tests.

    Args:
        post_id: Post the comment belongs to
        parent_id: Parent comment for replies
        author_id: Author (random if not given)
        content: Comment text
        minutes: Creation time as minutes after BASE_TIME
        comment_id: Comment ID (random if not given)

    Returns:
        Comment domain model
    """
    return Comment(
        id=comment_id or CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id or UserId(uuid4()),
        content=content,
        parent_id=parent_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
