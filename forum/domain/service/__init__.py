"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import build_comment_tree, count_all_children, count_comments
from .jwt_service import JWTService

__all__ = [
    "CommentService",
    "JWTService",
    "Service",
    "build_comment_tree",
    "count_all_children",
    "count_comments",
]
