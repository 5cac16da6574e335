# forum/api/routers/admin.py
import logging

from fastapi import APIRouter, Depends, Query
from tortoise.expressions import Q
from tortoise.transactions import in_transaction

from forum.api.deps import require_admin
from forum.core.errors import NotFound, ValidationError
from forum.models.user import User
from forum.schemas.admin import SetAdminIn, SetAdminOut
from forum.schemas.auth import UserOut, user_out

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/admin", tags=["admin"])


async def _locked_admin_ids(conn) -> list[int]:
    """
    Ids of every admin, row-locked until the surrounding transaction ends.

    Note:
        Concurrent demotions queue on these locks, so the last-admin check
        always sees the committed admin set.
    """
    return await User.filter(is_admin=True).select_for_update().using_db(conn).values_list("id", flat=True)


@router.get(
    "/users",
    response_model=list[UserOut],
    dependencies=[Depends(require_admin)],
)
async def list_users(
    q: str | None = Query(default=None, description="Fuzzy search by username/email"),
):
    """
    List all users, newest first (admin only).

    Raises:
        Forbidden (403): If user is not an admin
        Unauthenticated (401): If user is not authenticated
    """
    qs = User.all().order_by("-created_at", "-id")
    if q:
        qs = qs.filter(Q(username__icontains=q) | Q(email__icontains=q))
    return [user_out(u) for u in await qs]


@router.post("/set-admin", response_model=SetAdminOut)
async def set_admin(body: SetAdminIn, current_admin: User = Depends(require_admin)):
    """
    Grant or revoke the admin flag of a user (admin only).

    Guards:
        - An admin cannot remove their own flag
        - The last admin cannot be demoted

    Raises:
        NotFound (404): No user with that username
        ValidationError (400): CANNOT_DEMOTE_SELF / LAST_ADMIN_FORBIDDEN
        Forbidden (403): If caller is not an admin
        Unauthenticated (401): If caller is not authenticated
    """
    async with in_transaction() as conn:
        u = await User.filter(username=body.username).select_for_update().using_db(conn).first()
        if not u:
            raise NotFound("User not found", code="USER_NOT_FOUND")

        if u.is_admin and not body.isAdmin:
            if u.id == current_admin.id:
                raise ValidationError("Cannot demote yourself", code="CANNOT_DEMOTE_SELF")
            if len(await _locked_admin_ids(conn)) <= 1:
                raise ValidationError("Cannot demote the last admin", code="LAST_ADMIN_FORBIDDEN")

        if u.is_admin != body.isAdmin:
            u.is_admin = body.isAdmin
            await u.save(using_db=conn, update_fields=["is_admin"])
            logger.warning("[admin] user id=%s set is_admin=%s for user id=%s",
                           current_admin.id, body.isAdmin, u.id)
    return {"username": u.username, "isAdmin": u.is_admin}
