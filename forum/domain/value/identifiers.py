"""Strongly typed identifiers for forum entities.

Using NewType keeps post, comment and user IDs from being mixed up.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
