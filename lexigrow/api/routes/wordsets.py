import logging
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from lexigrow.utils.database import get_db
from lexigrow.services.content_service import ContentService
from lexigrow.api.dependencies import require_teacher
from lexigrow.api.schemas.word_schemas import WordSetCreate, WordSetResponse

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[WordSetResponse])
def list_word_sets(db: Session = Depends(get_db)):
    """
    单词包列表，最新的在前
    """
    return [word_set.to_dict() for word_set in ContentService(db).list_word_sets()]

@router.post("", response_model=WordSetResponse, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_teacher)])
def create_word_set(word_set_data: WordSetCreate, db: Session = Depends(get_db)):
    """
    老师新增单词包
    """
    word_set = ContentService(db).create_word_set(
        name=word_set_data.name,
        description=word_set_data.description,
        story_en=word_set_data.story_en,
        story_zh=word_set_data.story_zh,
        word_ids=word_set_data.word_ids
    )
    return word_set.to_dict()
