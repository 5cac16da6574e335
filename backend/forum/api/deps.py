# forum/api/deps.py
from fastapi import Depends, Header

from forum.core.errors import Forbidden, Unauthenticated
from forum.core.permissions import is_admin_action
from forum.models.user import User
from forum.services.auth import resolve_token


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Extract the token from an `Authorization: Bearer xxx` header, if any."""
    if authorization and authorization.lower().startswith("bearer "):
        return authorization.split(" ", 1)[1].strip() or None
    return None


async def get_optional_user(token: str | None = Depends(bearer_token)) -> User | None:
    """
    Resolve the caller from the bearer token, or None for anonymous requests.

    A token that is present but invalid, expired or revoked is still a 401;
    only a missing token means anonymous.
    """
    if not token:
        return None
    return await resolve_token(token)


async def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    """
    FastAPI dependency to get the current authenticated user.

    The user is loaded from the database through the server-held session the
    token names; nothing about the identity comes from the request body.

    Raises:
        Unauthenticated (401): No token (AUTH_REQUIRED) or invalid token (AUTH_INVALID_TOKEN)

    Usage:
        @router.post("/posts")
        async def create_post(body: PostCreateIn, user: User = Depends(get_current_user)):
            ...
    """
    if user is None:
        raise Unauthenticated()
    return user


async def require_admin(current: User = Depends(get_current_user)) -> User:
    """
    FastAPI dependency to ensure the current user is an administrator.

    Raises:
        Forbidden (403): If user is not an admin (FORBIDDEN_ADMIN_ONLY)
        Unauthenticated (401): If user is not authenticated (from get_current_user)
    """
    if not is_admin_action(current):
        raise Forbidden("Admin only", code="FORBIDDEN_ADMIN_ONLY")
    return current
