# forum/schemas/content.py
"""
Pydantic schemas for subjects, posts and replies.
Defines request/response models and the serializers used by the routers.
"""
from pydantic import BaseModel, Field
from typing import Optional

from forum.models.post import Post
from forum.models.reply import Reply
from forum.models.subject import Subject

class SubjectOut(BaseModel):
    id: int
    name: str


class PostCreateIn(BaseModel):
    """
    Request model for creating a post.
    subject_id must reference an existing subject.
    """
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    subject_id: int

    class Config:
        str_strip_whitespace = True


class PostOut(BaseModel):
    """
    Post as returned by list/detail/create endpoints.
    replyCount is the number of replies at query time.
    """
    id: int
    title: str
    content: str
    authorId: int
    authorName: str
    subjectId: int
    createdAt: Optional[str] = None
    replyCount: int = 0


class ReplyCreateIn(BaseModel):
    content: str = Field(min_length=1)

    class Config:
        str_strip_whitespace = True


class ReplyOut(BaseModel):
    id: int
    postId: int
    content: str
    authorId: int
    authorName: str
    createdAt: Optional[str] = None


def subject_out(s: Subject) -> dict:
    return {"id": s.id, "name": s.name}


def post_out(p: Post) -> dict:
    return {
        "id": p.id,
        "title": p.title,
        "content": p.content,
        "authorId": p.author_id,
        "authorName": p.author_name,
        "subjectId": p.subject_id,
        "createdAt": p.created_at.isoformat() if p.created_at else None,
        "replyCount": getattr(p, "reply_count", 0) or 0,  # Annotated by the content service
    }


def reply_out(r: Reply) -> dict:
    return {
        "id": r.id,
        "postId": r.post_id,
        "content": r.content,
        "authorId": r.author_id,
        "authorName": r.author_name,
        "createdAt": r.created_at.isoformat() if r.created_at else None,
    }
