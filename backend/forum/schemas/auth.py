# forum/schemas/auth.py
"""
Pydantic schemas for registration and login endpoints.
Defines request/response models and the public view of a user.
"""
from pydantic import BaseModel, Field

from forum.models.user import User

class RegisterIn(BaseModel):
    """
    Request model for registration.
    Format rules (length, charset, email syntax) are checked by the auth service
    so every failing field is reported at once.
    """
    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Contains credentials for authentication.
    """
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)  # Plain text, verified against the stored hash


class UserOut(BaseModel):
    """
    Public user information.
    Never carries the password hash.
    """
    id: int
    username: str
    email: str
    isAdmin: bool = False
    createdAt: str | None = None


class LoginResponse(UserOut):
    """
    Response model for successful login.
    The user fields sit at the top level next to the bearer token.
    """
    accessToken: str
    tokenType: str = "bearer"


def user_out(u: User) -> dict:
    return {
        "id": u.id,
        "username": u.username,
        "email": u.email,
        "isAdmin": bool(u.is_admin),
        "createdAt": u.created_at.isoformat() if u.created_at else None,
    }
