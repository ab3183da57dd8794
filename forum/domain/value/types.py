"""Domain value objects for the forum."""

from enum import Enum

from forum.domain.value.common import ValueObject
from forum.domain.value.identifiers import UserId


class Viewer(ValueObject):
    """The signed-in user looking at a thread.

    Only the identity is needed: it decides who may reply and who may
    delete a comment.
    """

    id: UserId


class ReplyFormState(str, Enum):
    """State of a single reply form."""

    COLLAPSED = "collapsed"
    EXPANDED = "expanded"
    SUBMITTING = "submitting"
