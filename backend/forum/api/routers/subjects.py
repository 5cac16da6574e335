# forum/api/routers/subjects.py
from fastapi import APIRouter

from forum.schemas.content import SubjectOut, subject_out
from forum.services import content

router = APIRouter(prefix="/subjects", tags=["subjects"])

@router.get("", response_model=list[SubjectOut])
async def list_subjects():
    """All subjects, in creation order."""
    return [subject_out(s) for s in await content.list_subjects()]
