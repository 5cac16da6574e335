# forum/services/auth.py
"""
Authenticator: registration, login and session token resolution.

Login issues a signed token that only names a server-held Session row.
Every authenticated request resolves that session back to a User loaded
from the database, so identity and admin flag are never taken from the client.
"""
import datetime as dt
import logging
import re

import jwt
from pydantic import validate_email
from pydantic_core import PydanticCustomError
from tortoise.exceptions import IntegrityError
from tortoise.transactions import in_transaction

from forum.core.errors import DuplicateUser, InvalidCredentials, Unauthenticated, ValidationError
from forum.core.security import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    create_access_token,
    decode_access_token,
    dummy_verify,
    hash_password,
    new_session_id,
    utc_now,
    verify_password,
)
from forum.models.session import Session
from forum.models.user import User

logger = logging.getLogger("uvicorn.error")

USERNAME_RE = re.compile(r"^[A-Za-z0-9_]{3,20}$")
MIN_PASSWORD_LENGTH = 6


def normalize_email(email: str) -> str | None:
    """Normalized address, or None when the syntax is invalid."""
    try:
        _, normalized = validate_email(email or "")
    except PydanticCustomError:
        return None
    return normalized


def validate_registration(username: str, email: str, password: str) -> dict[str, str]:
    """Return a field -> message mapping; empty when the input is acceptable."""
    errors = {}
    if not USERNAME_RE.match(username or ""):
        errors["username"] = "Username must be 3-20 characters of letters, digits or underscore"
    if normalize_email(email) is None:
        errors["email"] = "Invalid email address"
    if len(password or "") < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return errors


async def register(username: str, email: str, password: str) -> User:
    """
    Create a regular (non-admin) user.

    Raises:
        ValidationError: Username, email or password format is wrong
        DuplicateUser: Username or email already taken (database UNIQUE constraint)
    """
    errors = validate_registration(username, email, password)
    if errors:
        raise ValidationError(fields=errors)

    password_hash = hash_password(password)
    try:
        async with in_transaction():
            user = await User.create(
                username=username,
                email=normalize_email(email),
                password_hash=password_hash,
                is_admin=False,
            )
    except IntegrityError:
        raise DuplicateUser()
    logger.info("[auth] registered user id=%s username=%s", user.id, user.username)
    return user


async def authenticate(username: str, password: str) -> User:
    """
    Verify credentials.

    Unknown username and wrong password raise the same InvalidCredentials.
    """
    user = await User.get_or_none(username=username)
    if user is None:
        dummy_verify()
        raise InvalidCredentials()
    if not verify_password(password, user.password_hash):
        raise InvalidCredentials()
    return user


async def issue_token(user: User) -> str:
    expires_at = utc_now() + dt.timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    session = await Session.create(token_id=new_session_id(), user=user, expires_at=expires_at)
    return create_access_token(session.token_id, expires_at)


async def login(username: str, password: str) -> tuple[User, str]:
    """
    Authenticate and open a new session.

    Returns:
        (user, token): the authenticated user and its bearer token
    """
    user = await authenticate(username, password)
    token = await issue_token(user)
    logger.info("[auth] login user id=%s", user.id)
    return user, token


async def _session_for(token: str) -> Session:
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError:
        raise Unauthenticated("Invalid or expired token", code="AUTH_INVALID_TOKEN")
    session = await Session.get_or_none(
        token_id=payload.get("sid"),
        revoked=False,
        expires_at__gt=utc_now(),
    )
    if session is None:
        raise Unauthenticated("Invalid or expired token", code="AUTH_INVALID_TOKEN")
    return session


async def resolve_token(token: str) -> User:
    """
    Resolve a bearer token to the User behind its session.

    Raises:
        Unauthenticated: Bad signature, expired token, unknown or revoked session
    """
    session = await _session_for(token)
    user = await User.get_or_none(id=session.user_id)
    if user is None:
        raise Unauthenticated("Invalid or expired token", code="AUTH_INVALID_TOKEN")
    return user


async def revoke_token(token: str) -> None:
    session = await _session_for(token)
    session.revoked = True
    await session.save(update_fields=["revoked"])
    logger.info("[auth] logout user id=%s", session.user_id)
