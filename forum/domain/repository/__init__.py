"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from forum.domain.repository.comment import CommentRepository

__all__ = [
    "CommentRepository",
]
