"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.comment import Comment
from forum.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    This is the comment store the thread is built from. Implementations
    live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first.

        The list is flat; replies reference their parent through
        ``parent_id``.

        Args:
            post_id: The post ID

        Returns:
            List of comments ordered by creation time ascending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a single comment.

        Whether replies go with it is up to the implementation.

        Args:
            comment_id: The comment ID to delete
        """
        pass
