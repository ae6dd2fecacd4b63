from enum import Enum

from sqlalchemy import Column, Integer, ForeignKey, Boolean, DateTime, String, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import BaseModel

"""
单词掌握进度模型  
一个学生对一个单词的掌握情况：状态、是否陌生、熟悉度、答对/答错/不会次数和复习时间。
(student_id, word_id) 唯一。
"""


class ProgressStatus(str, Enum):
    LEARNING = "LEARNING"
    MASTERED = "MASTERED"


class StudentWordProgress(BaseModel):
    __tablename__ = "student_word_progress"
    __table_args__ = (
        UniqueConstraint("student_id", "word_id", name="uq_student_word_progress"),
    )

    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    word_id = Column(Integer, ForeignKey("words.id"), nullable=False)
    status = Column(String(20), nullable=False, default=ProgressStatus.LEARNING.value)
    is_stranger = Column(Boolean, nullable=False, default=False)
    familiarity_score = Column(Integer, nullable=False, default=0)  # 0-100
    correct_count = Column(Integer, nullable=False, default=0)
    wrong_count = Column(Integer, nullable=False, default=0)
    dont_know_count = Column(Integer, nullable=False, default=0)
    last_reviewed_at = Column(DateTime)
    next_review_at = Column(DateTime)

    word = relationship("Word")

    def to_dict(self):
        return {
            "id": self.id,
            "student_id": self.student_id,
            "word_id": self.word_id,
            "status": self.status,
            "is_stranger": self.is_stranger,
            "familiarity_score": self.familiarity_score,
            "correct_count": self.correct_count,
            "wrong_count": self.wrong_count,
            "dont_know_count": self.dont_know_count,
            "last_reviewed_at": self.last_reviewed_at.isoformat() if self.last_reviewed_at else None,
            "next_review_at": self.next_review_at.isoformat() if self.next_review_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None
        }
