import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from lexigrow.models.study_log import StudyLog, StudyAction
from lexigrow.repositories.study_log_repository import StudyLogRepository

logger = logging.getLogger(__name__)


class StudyLogService:
    """学习行为日志：每次复习动作追加一条，从不修改或删除"""

    def __init__(self, db: Session):
        self.db = db
        self.log_repo = StudyLogRepository(db)

    def record(self, student_id: int, word_id: int, action: StudyAction,
               is_familiar: bool, is_stranger: bool, created_at: datetime,
               request_id: Optional[str] = None) -> StudyLog:
        """追加一条日志（在调用方的事务中）"""
        log = self.log_repo.create(
            student_id=student_id,
            word_id=word_id,
            action=action.value,
            is_familiar=is_familiar,
            is_stranger=is_stranger,
            request_id=request_id,
            created_at=created_at
        )
        logger.debug(f"学习日志: 学生{student_id}, 单词{word_id}, {action.value}")
        return log

    def find_by_request_id(self, student_id: int, request_id: str) -> Optional[StudyLog]:
        return self.log_repo.get_by_request_id(student_id, request_id)
