# forum/api/routers/posts.py
from fastapi import APIRouter, Depends, Query, Response, status

from forum.api.deps import get_current_user
from forum.models.user import User
from forum.schemas.content import (
    PostCreateIn,
    PostOut,
    ReplyCreateIn,
    ReplyOut,
    post_out,
    reply_out,
)
from forum.services import content

router = APIRouter(prefix="/posts", tags=["posts"])

@router.get("", response_model=list[PostOut])
async def list_posts(
    subject_id: int | None = Query(default=None),
    sort: str | None = Query(default=None, description="new (default) or top"),
    search: str | None = Query(default=None, description="Case-insensitive match on title or content"),
    user: str | None = Query(default=None, description="Author username"),
):
    """
    List posts. Filters combine freely.

    Order:
        - new: newest first
        - top: most replies first, then newest first

    Raises:
        ValidationError (400): Unknown sort value
    """
    rows = await content.list_posts(subject_id=subject_id, sort=sort, search=search, user=user)
    return [post_out(p) for p in rows]

@router.post("", response_model=PostOut, status_code=status.HTTP_201_CREATED)
async def create_post(body: PostCreateIn, user: User = Depends(get_current_user)):
    """
    Create a post authored by the authenticated user.

    Raises:
        ValidationError (400): Missing/empty fields or unknown subject_id
        Unauthenticated (401): No valid session
    """
    p = await content.create_post(user, body.title, body.content, body.subject_id)
    return post_out(p)

@router.get("/{post_id}", response_model=PostOut)
async def get_post(post_id: int):
    """
    Get a single post with its reply count.

    Raises:
        NotFound (404): No such post
    """
    return post_out(await content.get_post(post_id))

@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_post(post_id: int, user: User = Depends(get_current_user)):
    """
    Delete a post and all its replies. Allowed for the author or an admin.

    Raises:
        Unauthenticated (401): No valid session
        Forbidden (403): Neither author nor admin
        NotFound (404): No such post
    """
    await content.delete_post(user, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{post_id}/replies", response_model=list[ReplyOut])
async def list_replies(post_id: int):
    """Replies of a post, oldest first."""
    return [reply_out(r) for r in await content.list_replies(post_id)]

@router.post("/{post_id}/replies", response_model=ReplyOut, status_code=status.HTTP_201_CREATED)
async def create_reply(post_id: int, body: ReplyCreateIn, user: User = Depends(get_current_user)):
    """
    Reply to a post as the authenticated user.

    Raises:
        ValidationError (400): Missing/empty content
        Unauthenticated (401): No valid session
        NotFound (404): No such post
    """
    r = await content.create_reply(user, post_id, body.content)
    return reply_out(r)
