"""Reply form state machine."""

from forum.domain.value import CommentId, ReplyFormState


class ReplyForm:
    """State of the reply form under one comment.

    The form for new top-level comments uses ``parent_id=None``.

    Transitions:
        COLLAPSED --toggle--> EXPANDED --begin_submit--> SUBMITTING
        SUBMITTING --succeed--> COLLAPSED (draft cleared)
        SUBMITTING --fail--> EXPANDED (error kept, inputs enabled again)
    """

    def __init__(self, parent_id: CommentId | None = None) -> None:
        self.parent_id = parent_id
        self.state = ReplyFormState.COLLAPSED
        self.draft = ""
        self.error: str | None = None

    @property
    def inputs_disabled(self) -> bool:
        """Whether the text box and submit button are disabled."""
        return self.state == ReplyFormState.SUBMITTING

    def toggle(self) -> None:
        """Open or close the form. Ignored while a submission is in flight."""
        if self.state == ReplyFormState.COLLAPSED:
            self.state = ReplyFormState.EXPANDED
        elif self.state == ReplyFormState.EXPANDED:
            self.state = ReplyFormState.COLLAPSED
            self.error = None

    def begin_submit(self) -> bool:
        """Enter SUBMITTING.

        Returns:
            False when the form is not open, which also blocks a second
            submit while one is already in flight
        """
        if self.state != ReplyFormState.EXPANDED:
            return False
        self.state = ReplyFormState.SUBMITTING
        self.error = None
        return True

    def succeed(self) -> None:
        self.state = ReplyFormState.COLLAPSED
        self.draft = ""
        self.error = None

    def fail(self, reason: str) -> None:
        self.state = ReplyFormState.EXPANDED
        self.error = reason
