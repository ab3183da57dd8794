"""SQLAlchemy table definitions for the forum.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, ForeignKey, Index, MetaData, Table, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# Posts and users live in the hosted backend; only their IDs are kept here.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("post_id", UUID, nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_post_id_created_at",
    comments_table.c.post_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
