import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lexigrow.utils.database import get_db
from lexigrow.services.progress_service import ProgressService
from lexigrow.services.user_service import UserService
from lexigrow.api.schemas.review_schemas import (
    ReviewRequest, ProgressResponse, ProgressLookupResponse
)

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/{student_id}/words/{word_id}", response_model=ProgressResponse)
def review_word(
    student_id: int,
    word_id: int,
    review_request: ReviewRequest,
    db: Session = Depends(get_db)
):
    """
    标记"我会 / 我不会"这个单词
    """
    progress_service = ProgressService(db)
    return progress_service.review_word(
        student_id, word_id, review_request.outcome,
        request_id=review_request.request_id
    )

@router.get("/{student_id}/words/{word_id}", response_model=ProgressLookupResponse)
def get_progress(student_id: int, word_id: int, db: Session = Depends(get_db)):
    """
    获取单词掌握情况，没有学习记录时 progress 为空
    """
    UserService(db).get_student(student_id)
    progress = ProgressService(db).get_progress(student_id, word_id)
    return {"progress": progress}
