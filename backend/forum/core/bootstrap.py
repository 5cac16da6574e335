# forum/core/bootstrap.py
"""
Bootstrap module for application initialization.
Seeds reference data and the default admin on first startup.
"""
import logging
from tortoise.exceptions import IntegrityError
from tortoise.transactions import in_transaction

from forum.config import settings
from forum.models.subject import Subject
from forum.models.user import User
from forum.core.security import hash_password

logger = logging.getLogger("uvicorn.error")

async def ensure_default_subjects() -> None:
    """
    Insert the configured subject list when the subjects table is empty.
    Existing subjects are never touched.
    """
    if await Subject.all().exists():
        return
    async with in_transaction():
        await Subject.bulk_create([Subject(name=name) for name in settings.default_subjects])
    logger.info("[bootstrap] Seeded subjects: %s", ", ".join(settings.default_subjects))

async def ensure_default_admin() -> None:
    """
    If no admin exists in the database, create a default admin based on environment variables.
    Only takes effect under the following conditions:
      - Currently no user with is_admin=True
      - And ADMIN_PASSWORD is set (to avoid using default weak password)
    Environment variables:
      ADMIN_USERNAME (default: "admin")
      ADMIN_EMAIL    (default: "admin@example.com")
      ADMIN_PASSWORD (required, otherwise won't create)
    """
    if await User.filter(is_admin=True).exists():
        return

    admin_password = settings.admin_password
    if not admin_password:
        logger.warning("[bootstrap] No admin present, but ADMIN_PASSWORD not set -> skip creating default admin.")
        return

    # If username is already taken by a regular account, pick a non-conflicting name
    base_username = settings.admin_username
    admin_username = base_username
    suffix = 1
    while await User.filter(username=admin_username).exists():
        suffix += 1
        admin_username = f"{base_username}{suffix}"

    try:
        u = await User.create(
            username=admin_username,
            email=settings.admin_email,
            password_hash=hash_password(admin_password),
            is_admin=True,
        )
    except IntegrityError:
        # ADMIN_EMAIL already belongs to another account
        logger.warning("[bootstrap] ADMIN_EMAIL=%s is already registered -> skip creating default admin.",
                       settings.admin_email)
        return
    logger.warning("[bootstrap] Created default admin -> username=%s email=%s id=%s",
                   u.username, u.email, u.id)
