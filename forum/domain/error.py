"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class FetchFailure(DomainError):
    """Listing the comments of a post failed."""

    def __init__(self, post_id: str, reason: str):
        self.post_id = post_id
        self.reason = reason
        super().__init__(f"Failed to load comments for post {post_id}: {reason}")


class MutationFailure(DomainError):
    """Creating or deleting a comment failed.

    Not retried automatically; the caller decides what to show the user.
    """

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Failed to {operation} comment: {reason}")
