import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from lexigrow.utils.database import get_db
from lexigrow.services.stats_service import StatsService
from lexigrow.api.dependencies import require_teacher
from lexigrow.api.schemas.stats_schemas import StudentStatsResponse

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(require_teacher)])

@router.get("/students", response_model=List[StudentStatsResponse])
def list_all_student_stats(db: Session = Depends(get_db)):
    """
    所有学生的学习数据，按注册时间排序
    """
    return StatsService(db).list_all_student_stats()

@router.get("/students/{student_id}", response_model=StudentStatsResponse)
def get_student_stats(student_id: int, db: Session = Depends(get_db)):
    """
    单个学生的学习数据
    """
    return StatsService(db).get_student_stats(student_id)
