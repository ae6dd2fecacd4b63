from sqlalchemy import Column, String, Integer, ForeignKey
from .base import BaseModel


"""
经验值事件模型  
每次发放经验值追加一条，只增不改。
"""

class XPEvent(BaseModel):
    __tablename__ = "xp_events"

    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    points = Column(Integer, nullable=False)
    reason = Column(String(100), nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "student_id": self.student_id,
            "points": self.points,
            "reason": self.reason,
            "created_at": self.created_at.isoformat() if self.created_at else None
        }
