"""Client-side state of one comment thread.

A CommentThread is what a single viewer holds while looking at a post:
the current reply forest plus one reply form per comment. There is no
incremental patching. Every successful reply or delete is followed by a
full re-fetch and rebuild of the whole forest.
"""

from collections.abc import Callable
from datetime import datetime

import logfire

from forum.domain.error import (
    FetchFailure,
    MutationFailure,
    NotAuthorizedError,
    NotFoundError,
)
from forum.domain.model.comment import CommentNode
from forum.domain.service import CommentService
from forum.domain.service.comment_tree import build_comment_tree, count_comments
from forum.domain.value import CommentId, PostId, ReplyFormState, Viewer
from forum.application.view.comment_tree import (
    INDENT_STEP,
    MAX_REPLY_DEPTH,
    RenderedComment,
    render_comment_forest,
)

from .reply_form import ReplyForm


class CommentThread:
    """One viewer's copy of a post's comment thread."""

    def __init__(
        self,
        post_id: PostId,
        comment_service: CommentService,
        viewer: Viewer | None,
        max_reply_depth: int = MAX_REPLY_DEPTH,
        indent_step: int = INDENT_STEP,
    ) -> None:
        """Initialize an empty thread. Call refresh() to load it.

        Args:
            post_id: Post whose comments are shown
            comment_service: Comment store access
            viewer: Signed-in viewer, None when anonymous
            max_reply_depth: First depth at which replying is no longer offered
            indent_step: Indentation added per level
        """
        self.post_id = post_id
        self.comment_service = comment_service
        self.viewer = viewer
        self.max_reply_depth = max_reply_depth
        self.indent_step = indent_step

        self.roots: list[CommentNode] = []
        self.fetch_error: FetchFailure | None = None
        self._forms: dict[CommentId | None, ReplyForm] = {}
        self._depths: dict[CommentId, tuple[CommentNode, int]] = {}

    @property
    def total_comments(self) -> int:
        """Number of comments in the thread, replies included."""
        return count_comments(self.roots)

    async def refresh(self) -> list[CommentNode]:
        """Fetch the flat comment list again and rebuild the forest.

        A failed fetch is logged and leaves the thread empty rather than
        raising.

        Returns:
            The new root nodes
        """
        with logfire.span("comment_thread.refresh", post_id=str(self.post_id)):
            try:
                comments = await self.comment_service.get_comments_for_post(
                    self.post_id
                )
                self.fetch_error = None
            except Exception as e:
                self.fetch_error = FetchFailure(str(self.post_id), str(e))
                logfire.warn(
                    "Error fetching comments",
                    post_id=str(self.post_id),
                    error=str(e),
                )
                comments = []

            self.roots = build_comment_tree(comments)
            self._index()
            return self.roots

    def _index(self) -> None:
        self._depths = {}
        stack = [(root, 0) for root in reversed(self.roots)]
        while stack:
            node, depth = stack.pop()
            self._depths[node.id] = (node, depth)
            stack.extend((child, depth + 1) for child in reversed(node.children))

        # Forms of comments that are gone would never be shown again
        self._forms = {
            parent_id: form
            for parent_id, form in self._forms.items()
            if parent_id is None or parent_id in self._depths
        }

    def find(self, comment_id: CommentId) -> CommentNode | None:
        """Look up a comment in the current forest."""
        entry = self._depths.get(comment_id)
        return entry[0] if entry else None

    def depth_of(self, comment_id: CommentId) -> int | None:
        """Depth of a comment in the current forest (root = 0)."""
        entry = self._depths.get(comment_id)
        return entry[1] if entry else None

    def reply_form(self, parent_id: CommentId | None = None) -> ReplyForm:
        """Reply form under a comment, or the top-level form for None."""
        if parent_id not in self._forms:
            self._forms[parent_id] = ReplyForm(parent_id)
        return self._forms[parent_id]

    def can_reply(self, parent_id: CommentId | None) -> bool:
        """Whether the viewer may reply under a comment (or at top level)."""
        if self.viewer is None:
            return False
        if parent_id is None:
            return True
        depth = self.depth_of(parent_id)
        return depth is not None and depth < self.max_reply_depth

    def can_delete(self, comment_id: CommentId) -> bool:
        """Whether the viewer wrote the comment."""
        node = self.find(comment_id)
        return (
            self.viewer is not None
            and node is not None
            and node.author_id == self.viewer.id
        )

    async def submit_reply(self, parent_id: CommentId | None, content: str) -> bool:
        """Submit the reply form under a comment.

        The form must be open. On success it collapses and the thread is
        refreshed once. On failure it stays open with the error and the
        failure is raised.

        Args:
            parent_id: Comment replied to, None for a top-level comment
            content: Comment text

        Returns:
            True if the comment was created, False if the form was not
            open (including a submission already in flight)

        Raises:
            MutationFailure: If the viewer may not reply here or the store
                rejected the comment
        """
        if not self.can_reply(parent_id):
            raise MutationFailure("create", "Replies are not allowed here")

        form = self.reply_form(parent_id)
        if form.state != ReplyFormState.EXPANDED:
            return False
        form.draft = content
        if not content.strip():
            form.error = "Comment cannot be empty"
            raise MutationFailure("create", form.error)
        form.begin_submit()

        with logfire.span(
            "comment_thread.submit_reply",
            post_id=str(self.post_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            try:
                await self.comment_service.create_comment(
                    content=content.strip(),
                    post_id=self.post_id,
                    author_id=self.viewer.id,
                    parent_id=parent_id,
                )
            except Exception as e:
                form.fail(str(e))
                logfire.error(
                    "Error creating comment",
                    post_id=str(self.post_id),
                    error=str(e),
                )
                raise MutationFailure("create", str(e)) from e

            form.succeed()
            await self.refresh()
            return True

    async def delete_comment(
        self, comment_id: CommentId, confirm: Callable[[], bool]
    ) -> bool:
        """Delete one of the viewer's own comments.

        ``confirm`` is asked first; nothing is sent unless it returns True.
        A failed delete leaves the forest as it was.

        Args:
            comment_id: Comment to delete
            confirm: Destructive-action confirmation prompt

        Returns:
            True if the comment was deleted, False if the viewer cancelled

        Raises:
            NotFoundError: If the comment is not in the thread
            NotAuthorizedError: If the viewer did not write the comment
            MutationFailure: If the store rejected the deletion
        """
        if self.find(comment_id) is None:
            raise NotFoundError("Comment", str(comment_id))
        if not self.can_delete(comment_id):
            user_id = str(self.viewer.id) if self.viewer else "anonymous"
            raise NotAuthorizedError("comment", str(comment_id), user_id)

        if not confirm():
            logfire.info("Comment deletion cancelled", comment_id=str(comment_id))
            return False

        with logfire.span(
            "comment_thread.delete_comment", comment_id=str(comment_id)
        ):
            try:
                await self.comment_service.delete_comment(comment_id, self.viewer.id)
            except Exception as e:
                logfire.error(
                    "Error deleting comment",
                    comment_id=str(comment_id),
                    error=str(e),
                )
                raise MutationFailure("delete", str(e)) from e

            await self.refresh()
            return True

    def render(self, now: datetime | None = None) -> list[RenderedComment]:
        """Render the current forest for this thread's viewer."""
        return render_comment_forest(
            self.roots,
            self.viewer,
            max_reply_depth=self.max_reply_depth,
            indent_step=self.indent_step,
            now=now,
        )
