# forum/core/security.py
"""
Security module for authentication.
Handles password hashing and signing/validation of session tokens.
"""
import datetime as dt
import secrets

import jwt  # PyJWT
from passlib.context import CryptContext

from forum.config import settings

# Password hashing context
# Argon2 with a fixed time cost; every stored hash gets its own random salt
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__rounds=settings.password_hash_rounds,
)

# JWT configuration
JWT_SECRET = settings.jwt_secret  # Secret key for token signing (use strong secret in production)
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes  # Token lifetime in minutes
JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)


def utc_now() -> dt.datetime:
    """Current UTC datetime with timezone information."""
    return dt.datetime.now(dt.timezone.utc)


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain, hashed)


def dummy_verify() -> None:
    """Spend the same time as a real verification when there is no user to check against."""
    pwd_context.dummy_verify()


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


def create_access_token(session_id: str, expires_at: dt.datetime) -> str:
    """
    Create a signed bearer token for a server-held session.

    The token only references the session. User id and admin flag are looked
    up from the database on every request, never read from the token.

    Token payload includes:
        - sid: Session identifier (Session.token_id)
        - iat: Issued at timestamp
        - exp: Expiration timestamp
    """
    payload = {
        "sid": session_id,
        "iat": utc_now(),
        "exp": expires_at,
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)


def decode_access_token(token: str) -> dict:
    """
    Decode and validate a session token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or malformed
    """
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALG], options={"require": ["sid", "exp"]})
