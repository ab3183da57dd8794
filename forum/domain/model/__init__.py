"""Domain model entities for the forum."""

from forum.domain.model.comment import Comment, CommentNode

__all__ = [
    "Comment",
    "CommentNode",
]
