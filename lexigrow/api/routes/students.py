import logging
from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from lexigrow.utils.database import get_db
from lexigrow.services.user_service import UserService
from lexigrow.services.xp_service import XPService
from lexigrow.services.progress_service import ProgressService
from lexigrow.services.overview_service import OverviewService
from lexigrow.api.schemas.student_schemas import (
    StudentCreate, StudentResponse, ProfileOverviewResponse, XPEventResponse
)
from lexigrow.api.schemas.review_schemas import StrangerWordResponse

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/current", response_model=StudentResponse)
def get_current_student(db: Session = Depends(get_db)):
    """
    获取当前学生（不存在时创建默认学生）
    """
    return UserService(db).resolve_current_student()

@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
def create_student(student_data: StudentCreate, db: Session = Depends(get_db)):
    """
    新建学生
    """
    return UserService(db).create_student(student_data.name)

@router.get("/{student_id}/profile", response_model=ProfileOverviewResponse)
def get_profile_overview(student_id: int, db: Session = Depends(get_db)):
    """
    我的成长：等级、经验值和最近的经验值记录
    """
    return OverviewService(db).get_profile_overview(student_id)

@router.get("/{student_id}/xp-events", response_model=List[XPEventResponse])
def get_recent_xp_events(
    student_id: int,
    limit: int = Query(10, ge=1, le=100, description="返回数量"),
    db: Session = Depends(get_db)
):
    """
    最近的经验值记录，最新的在前
    """
    return XPService(db).recent_events(student_id, limit)

@router.get("/{student_id}/strangers", response_model=List[StrangerWordResponse])
def list_stranger_words(student_id: int, db: Session = Depends(get_db)):
    """
    陌生单词复习列表，最近更新的在前
    """
    return ProgressService(db).list_stranger_words(student_id)
