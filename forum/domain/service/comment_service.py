"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.model.comment import Comment, CommentNode
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, PostId, UserId

from .base import Service
from .comment_tree import build_comment_tree, count_comments


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        content: str,
        post_id: PostId,
        author_id: UserId,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            content: Comment text
            post_id: Post ID
            author_id: Author user ID
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValueError: If parent comment invalid
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise ValueError("Parent comment not found")
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValueError("Parent comment does not belong to this post")

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Flat list of comments
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def get_comment_tree(self, post_id: PostId) -> list[CommentNode]:
        """Get the comments of a post as a reply forest.

        Args:
            post_id: Post ID

        Returns:
            Root comment nodes with replies attached
        """
        comments = await self.get_comments_for_post(post_id)
        roots = build_comment_tree(comments)
        logfire.info(
            "Comment tree built",
            post_id=str(post_id),
            roots=len(roots),
            total=count_comments(roots),
        )
        return roots

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment_depth(self, comment_id: CommentId) -> int:
        """Get how deep a comment sits in its thread (root = 0).

        Follows parent references through the store. A missing parent or a
        parent loop ends the walk, the same way the tree builder promotes
        such comments to roots.

        Args:
            comment_id: Comment ID

        Returns:
            Number of ancestors found above the comment
        """
        depth = 0
        seen = {comment_id}
        comment = await self.comment_repository.find_by_id(comment_id)
        while comment is not None and comment.parent_id is not None:
            if comment.parent_id in seen:
                break
            seen.add(comment.parent_id)
            comment = await self.comment_repository.find_by_id(comment.parent_id)
            if comment is None:
                break
            depth += 1
        return depth

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> None:
        """Delete a comment written by the given user.

        Only the comment itself is deleted here. Replies are left to the
        store: they either go with it or show up as orphans.

        Args:
            comment_id: Comment ID
            user_id: ID of the user asking for the deletion

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", str(comment_id))
            if comment.author_id != user_id:
                logfire.warn(
                    "Comment deletion by non-author",
                    comment_id=str(comment_id),
                    author_id=str(comment.author_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                post_id=str(comment.post_id),
            )
