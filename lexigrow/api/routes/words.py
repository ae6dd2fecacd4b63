import logging
from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from lexigrow.utils.database import get_db
from lexigrow.services.content_service import ContentService
from lexigrow.services.overview_service import OverviewService
from lexigrow.api.dependencies import require_teacher
from lexigrow.api.schemas.word_schemas import WordCreate, WordResponse
from lexigrow.api.schemas.review_schemas import WordDetailResponse

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[WordResponse])
def list_words(
    limit: int = Query(50, ge=1, le=500, description="返回数量"),
    order: str = Query("desc", pattern="^(asc|desc)$", description="按创建时间排序"),
    db: Session = Depends(get_db)
):
    """
    单词列表
    """
    return ContentService(db).list_words(limit, order)

@router.post("", response_model=WordResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_teacher)])
def create_word(word_data: WordCreate, db: Session = Depends(get_db)):
    """
    老师新增单词
    """
    fields = word_data.model_dump(exclude={"text"})
    return ContentService(db).create_word(word_data.text, **fields)

@router.get("/{word_id}", response_model=WordResponse)
def get_word(word_id: int, db: Session = Depends(get_db)):
    """
    获取单词
    """
    return ContentService(db).require_word(word_id)

@router.get("/{word_id}/detail", response_model=WordDetailResponse)
def get_word_detail(
    word_id: int,
    student_id: int = Query(..., description="学生ID"),
    db: Session = Depends(get_db)
):
    """
    单词详情页：单词内容 + 当前学生的掌握情况
    """
    return OverviewService(db).get_word_detail(student_id, word_id)
