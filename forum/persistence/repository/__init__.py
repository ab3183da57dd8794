"""PostgreSQL repository implementations."""

from forum.persistence.repository.comment import PostgresCommentRepository

__all__ = [
    "PostgresCommentRepository",
]
