"""Thread view models."""

from .comment_tree import (
    RenderedComment,
    render_comment,
    render_comment_forest,
)
from .time_ago import format_time_ago

__all__ = [
    "RenderedComment",
    "format_time_ago",
    "render_comment",
    "render_comment_forest",
]
