"""JWT token domain service."""

from uuid import UUID

import logfire

from forum.config import AuthSettings
from forum.domain.value import UserId, Viewer
from forum.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    Answers "who is looking at this thread" from the auth cookie.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Extract user ID from JWT token without raising exceptions.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return payload.user_id
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

    def current_viewer(self, token: str | None) -> Viewer | None:
        """Resolve the signed-in viewer from a token.

        Args:
            token: JWT token string (optional)

        Returns:
            Viewer if the token is valid and names a user, None otherwise
        """
        user_id = self.get_user_id_from_token(token)
        if user_id is None:
            return None

        try:
            return Viewer(id=UserId(UUID(user_id)))
        except ValueError:
            logfire.warn("Token carries a malformed user ID", user_id=user_id)
            return None
