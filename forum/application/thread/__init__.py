"""Client-side comment thread state."""

from .comment_thread import CommentThread
from .reply_form import ReplyForm

__all__ = [
    "CommentThread",
    "ReplyForm",
]
