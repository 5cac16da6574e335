# forum/services/content.py
"""
Content store operations: subjects, posts and replies.

Listing posts composes independent filters (subject, search, author) with one
of two orders:
  - new: newest first
  - top: most replies first, ties broken newest first
Deletes check ownership and remove the row inside one transaction, targeting
the row by both id and the owner that was checked.
"""
import logging

from tortoise.expressions import Q
from tortoise.functions import Count
from tortoise.transactions import in_transaction

from forum.core.errors import NotFound, ValidationError
from forum.core.permissions import ensure_can_mutate
from forum.models.post import Post
from forum.models.reply import Reply
from forum.models.subject import Subject
from forum.models.user import User

logger = logging.getLogger("uvicorn.error")

SORT_ORDERS = {
    "new": ("-created_at", "-id"),
    "top": ("-reply_count", "-created_at", "-id"),
}
DEFAULT_SORT = "new"


async def list_subjects() -> list[Subject]:
    return await Subject.all().order_by("id")


def _posts_with_reply_count():
    return Post.all().annotate(reply_count=Count("replies"))


async def list_posts(
    subject_id: int | None = None,
    sort: str | None = None,
    search: str | None = None,
    user: str | None = None,
) -> list[Post]:
    """
    List posts with optional filters.

    Args:
        subject_id: Only posts under this subject
        sort: "new" (default) or "top"
        search: Case-insensitive substring of title or content
        user: Only posts authored by this username

    Raises:
        ValidationError: Unknown sort order
    """
    order = SORT_ORDERS.get(sort or DEFAULT_SORT)
    if order is None:
        raise ValidationError(fields={"sort": "Sort must be one of: new, top"})

    qs = _posts_with_reply_count()
    if subject_id is not None:
        qs = qs.filter(subject_id=subject_id)
    if search:
        qs = qs.filter(Q(title__icontains=search) | Q(content__icontains=search))
    if user:
        qs = qs.filter(author__username=user)
    return await qs.order_by(*order)


async def get_post(post_id: int) -> Post:
    post = await _posts_with_reply_count().filter(id=post_id).first()
    if post is None:
        raise NotFound("Post not found")
    return post


async def create_post(author: User, title: str, content: str, subject_id: int) -> Post:
    """
    Create a post owned by `author` under an existing subject.

    Raises:
        ValidationError: subject_id does not reference a subject
    """
    if not await Subject.filter(id=subject_id).exists():
        raise ValidationError(fields={"subject_id": "Unknown subject"})
    post = await Post.create(
        title=title,
        content=content,
        author=author,
        author_name=author.username,
        subject_id=subject_id,
    )
    post.reply_count = 0
    logger.info("[content] post id=%s created by user id=%s", post.id, author.id)
    return post


async def delete_post(actor: User | None, post_id: int) -> None:
    """
    Delete a post and its replies.

    Raises:
        NotFound: No such post
        Unauthenticated / Forbidden: see ensure_can_mutate
    """
    async with in_transaction():
        post = await Post.get_or_none(id=post_id)
        if post is None:
            raise NotFound("Post not found")
        ensure_can_mutate(actor, post.author_id)
        await Reply.filter(post_id=post.id).delete()
        deleted = await Post.filter(id=post.id, author_id=post.author_id).delete()
    if not deleted:
        raise NotFound("Post not found")
    logger.info("[content] post id=%s deleted by user id=%s", post_id, actor.id)


async def list_replies(post_id: int) -> list[Reply]:
    """Replies of a post, oldest first. An unknown post has no replies."""
    return await Reply.filter(post_id=post_id).order_by("created_at", "id")


async def list_user_replies(username: str) -> list[Reply]:
    """Replies written by `username`, newest first."""
    return await Reply.filter(author__username=username).order_by("-created_at", "-id")


async def create_reply(author: User, post_id: int, content: str) -> Reply:
    """
    Reply to an existing post.

    Raises:
        NotFound: No such post
    """
    if not await Post.filter(id=post_id).exists():
        raise NotFound("Post not found")
    reply = await Reply.create(
        post_id=post_id,
        content=content,
        author=author,
        author_name=author.username,
    )
    logger.info("[content] reply id=%s on post id=%s by user id=%s", reply.id, post_id, author.id)
    return reply


async def delete_reply(actor: User | None, reply_id: int) -> None:
    """
    Delete a single reply.

    Raises:
        NotFound: No such reply
        Unauthenticated / Forbidden: see ensure_can_mutate
    """
    async with in_transaction():
        reply = await Reply.get_or_none(id=reply_id)
        if reply is None:
            raise NotFound("Reply not found")
        ensure_can_mutate(actor, reply.author_id)
        deleted = await Reply.filter(id=reply.id, author_id=reply.author_id).delete()
    if not deleted:
        raise NotFound("Reply not found")
    logger.info("[content] reply id=%s deleted by user id=%s", reply_id, actor.id)
