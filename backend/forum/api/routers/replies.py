# forum/api/routers/replies.py
from fastapi import APIRouter, Depends, Query, Response, status

from forum.api.deps import get_current_user
from forum.models.user import User
from forum.schemas.content import ReplyOut, reply_out
from forum.services import content

router = APIRouter(prefix="/replies", tags=["replies"])

@router.get("", response_model=list[ReplyOut])
async def list_user_replies(user: str = Query(min_length=1, description="Author username")):
    """
    Replies written by one user, newest first.
    The `user` query parameter is required (400 without it).
    """
    return [reply_out(r) for r in await content.list_user_replies(user)]

@router.delete("/{reply_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_reply(reply_id: int, user: User = Depends(get_current_user)):
    """
    Delete a reply. Allowed for the author or an admin.

    Raises:
        Unauthenticated (401): No valid session
        Forbidden (403): Neither author nor admin
        NotFound (404): No such reply
    """
    await content.delete_reply(user, reply_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
