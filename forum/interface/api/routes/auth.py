"""Authentication routes.

Sign-up and sign-in happen in the hosted auth backend. This service only
reads the resulting token to find out who is looking.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from forum.domain.service import JWTService

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class AuthStatusResponse(BaseModel):
    """Current viewer, or an unauthenticated status."""

    authenticated: bool
    user_id: str | None = None


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without authentication.

    Args:
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie (optional)

    Returns:
        Authentication status with the user ID if authenticated
    """
    viewer = jwt_service.current_viewer(auth_token)
    if viewer is None:
        return AuthStatusResponse(authenticated=False)
    return AuthStatusResponse(authenticated=True, user_id=str(viewer.id))
