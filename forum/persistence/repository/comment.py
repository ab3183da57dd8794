"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, PostId
from forum.persistence.mappers import comment_to_dict, row_to_comment
from forum.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(comment.id) or comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (replies are removed by the foreign key cascade)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()
