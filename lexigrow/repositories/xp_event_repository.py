from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import desc

from lexigrow.models.xp_event import XPEvent
from lexigrow.repositories.base import BaseRepository


class XPEventRepository(BaseRepository[XPEvent]):
    def __init__(self, db: Session):
        super().__init__(db, XPEvent)
    
    def get_recent_events(self, student_id: int, limit: int) -> List[XPEvent]:
        """获取最近的经验值事件，最新的在前"""
        return self.db.query(XPEvent).filter(
            XPEvent.student_id == student_id
        ).order_by(desc(XPEvent.created_at), desc(XPEvent.id)).limit(limit).all()
