from typing import Dict, Optional
from sqlalchemy.orm import Session
from sqlalchemy import desc, func

from lexigrow.models.study_log import StudyLog
from lexigrow.repositories.base import BaseRepository


class StudyLogRepository(BaseRepository[StudyLog]):
    def __init__(self, db: Session):
        super().__init__(db, StudyLog)
    
    def get_by_request_id(self, student_id: int, request_id: str) -> Optional[StudyLog]:
        """根据幂等键查找日志"""
        return self.db.query(StudyLog).filter(
            StudyLog.student_id == student_id,
            StudyLog.request_id == request_id
        ).first()
    
    def count_by_action(self, student_id: int) -> Dict[str, int]:
        """按行为类型统计日志条数"""
        rows = self.db.query(StudyLog.action, func.count(StudyLog.id)).filter(
            StudyLog.student_id == student_id
        ).group_by(StudyLog.action).all()
        return {action: count for action, count in rows}
    
    def get_latest_log(self, student_id: int) -> Optional[StudyLog]:
        """获取最近一条日志"""
        return self.db.query(StudyLog).filter(
            StudyLog.student_id == student_id
        ).order_by(desc(StudyLog.created_at), desc(StudyLog.id)).first()
