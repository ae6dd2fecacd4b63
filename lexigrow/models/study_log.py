from enum import Enum

from sqlalchemy import Column, String, Integer, ForeignKey, Boolean, UniqueConstraint
from .base import BaseModel


"""
学习行为日志模型  
每次复习动作追加一条（mark_known / mark_unknown），只增不改。
request_id 是可选的幂等键，同一学生的同一个 request_id 只会记录一次。
"""


class StudyAction(str, Enum):
    MARK_KNOWN = "mark_known"
    MARK_UNKNOWN = "mark_unknown"


class StudyLog(BaseModel):
    __tablename__ = "study_logs"
    __table_args__ = (
        UniqueConstraint("student_id", "request_id", name="uq_study_log_request"),
    )

    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    word_id = Column(Integer, ForeignKey("words.id"), nullable=False)
    action = Column(String(50), nullable=False)
    is_familiar = Column(Boolean, nullable=False, default=False)
    is_stranger = Column(Boolean, nullable=False, default=False)
    request_id = Column(String(64))

    def to_dict(self):
        return {
            "id": self.id,
            "student_id": self.student_id,
            "word_id": self.word_id,
            "action": self.action,
            "is_familiar": self.is_familiar,
            "is_stranger": self.is_stranger,
            "request_id": self.request_id,
            "created_at": self.created_at.isoformat() if self.created_at else None
        }
