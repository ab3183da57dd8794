"""In-memory comment repository for testing."""

from typing import Optional

from forum.domain.model.comment import Comment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Deleting a comment leaves its replies in place, so they come back
    from find_by_post as orphans.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]

        # Stable sort keeps insertion order for equal timestamps
        comments.sort(key=lambda c: c.created_at)

        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)
