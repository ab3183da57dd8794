"""Comment entity and the tree node derived from it.

Comments are stored flat: each one points at its parent (or at nothing,
for a top-level comment). The nested shape is rebuilt from the flat list
every time it is needed.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.
    ``parent_id`` is None for top-level comments.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)


class CommentNode(Comment):
    """A comment together with its replies.

    ``children`` keeps the order in which the replies were listed by the
    store. Nodes are only ever built by the tree builder; a changed thread
    is rebuilt from scratch rather than patched.
    """

    children: list["CommentNode"] = Field(default_factory=list)

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentNode":
        """Create a childless node carrying the comment's fields."""
        return cls(**comment.model_dump())
