"""Comment thread rendering.

Turns a comment forest into the nested view model the front end draws:
each comment gets its indentation, a relative timestamp and the actions
the current viewer may take on it.
"""

from datetime import datetime

from pydantic import BaseModel

from forum.domain.model.comment import CommentNode
from forum.domain.value import Viewer

from .time_ago import format_time_ago

MAX_REPLY_DEPTH = 5
INDENT_STEP = 24


class RenderedComment(BaseModel):
    """A comment as displayed in a thread."""

    comment_id: str
    parent_id: str | None
    author_id: str
    content: str
    created_at: datetime
    time_ago: str
    depth: int
    indent: int
    can_reply: bool
    can_delete: bool
    reply_count: int
    children: list["RenderedComment"]


def render_comment(
    node: CommentNode,
    depth: int,
    viewer: Viewer | None,
    *,
    max_reply_depth: int = MAX_REPLY_DEPTH,
    indent_step: int = INDENT_STEP,
    now: datetime | None = None,
) -> RenderedComment:
    """Render a comment and, recursively, its replies.

    Every reply is rendered whatever its depth; only the reply action is
    cut off at ``max_reply_depth``.

    Args:
        node: Comment node to render
        depth: Distance from the root (root = 0)
        viewer: Signed-in viewer, None when anonymous
        max_reply_depth: First depth at which replying is no longer offered
        indent_step: Indentation added per level
        now: Reference time for relative timestamps

    Returns:
        Rendered comment with rendered children
    """
    children = [
        render_comment(
            child,
            depth + 1,
            viewer,
            max_reply_depth=max_reply_depth,
            indent_step=indent_step,
            now=now,
        )
        for child in node.children
    ]

    return RenderedComment(
        comment_id=str(node.id),
        parent_id=str(node.parent_id) if node.parent_id else None,
        author_id=str(node.author_id),
        content=node.content,
        created_at=node.created_at,
        time_ago=format_time_ago(node.created_at, now),
        depth=depth,
        indent=depth * indent_step,
        can_reply=viewer is not None and depth < max_reply_depth,
        can_delete=viewer is not None and viewer.id == node.author_id,
        reply_count=sum(child.reply_count + 1 for child in children),
        children=children,
    )


def render_comment_forest(
    roots: list[CommentNode],
    viewer: Viewer | None,
    *,
    max_reply_depth: int = MAX_REPLY_DEPTH,
    indent_step: int = INDENT_STEP,
    now: datetime | None = None,
) -> list[RenderedComment]:
    """Render every root of a forest at depth 0."""
    return [
        render_comment(
            root,
            0,
            viewer,
            max_reply_depth=max_reply_depth,
            indent_step=indent_step,
            now=now,
        )
        for root in roots
    ]
