# forum/api/routers/auth.py
from fastapi import APIRouter, Depends, status

from forum.api.deps import bearer_token, get_current_user
from forum.models.user import User
from forum.schemas.auth import LoginRequest, LoginResponse, RegisterIn, UserOut, user_out
from forum.services import auth as auth_service

router = APIRouter(tags=["auth"])

@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def register(body: RegisterIn):
    """
    Register a new user account.

    The password is hashed before storage. Username and email must be unique;
    the new account is never an admin, whatever the request contains.

    Returns:
        UserOut: id, username, email, isAdmin (always false), createdAt

    Error codes (400):
        - VALIDATION_ERROR: username/email/password format (see detail.fields)
        - DUPLICATE_USER: username or email already registered
    """
    u = await auth_service.register(body.username, body.email, body.password)
    return user_out(u)

@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest):
    """
    Authenticate user and open a session.

    Returns:
        LoginResponse:
            - id, username, email, isAdmin, createdAt: public user fields (no password hash)
            - accessToken: bearer token referencing the new server-held session
            - tokenType: "bearer"

    Raises:
        InvalidCredentials (401): Unknown username or wrong password (same response for both)
    """
    user, token = await auth_service.login(payload.username, payload.password)
    return {**user_out(user), "accessToken": token, "tokenType": "bearer"}

@router.post("/logout")
async def logout(
    user: User = Depends(get_current_user),
    token: str | None = Depends(bearer_token),
):
    """
    Revoke the session behind the presented token.
    Later requests with the same token get 401.
    """
    await auth_service.revoke_token(token)
    return {"ok": True}

@router.get("/me", response_model=UserOut)
async def me(user: User = Depends(get_current_user)):
    """Return the authenticated user's public information."""
    return user_out(user)
