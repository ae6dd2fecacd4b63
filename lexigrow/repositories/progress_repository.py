from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import desc

from lexigrow.models.progress import StudentWordProgress, ProgressStatus
from lexigrow.repositories.base import BaseRepository


class ProgressRepository(BaseRepository[StudentWordProgress]):
    def __init__(self, db: Session):
        super().__init__(db, StudentWordProgress)
    
    def get_progress(self, student_id: int, word_id: int,
                     for_update: bool = False) -> Optional[StudentWordProgress]:
        """根据学生ID和单词ID获取掌握进度，for_update 时加行锁"""
        query = self.db.query(StudentWordProgress).filter(
            StudentWordProgress.student_id == student_id,
            StudentWordProgress.word_id == word_id
        )
        if for_update:
            query = query.with_for_update()
        return query.first()
    
    def get_stranger_words(self, student_id: int) -> List[StudentWordProgress]:
        """获取学生所有陌生单词，最近更新的在前"""
        return self.db.query(StudentWordProgress).options(
            joinedload(StudentWordProgress.word)
        ).filter(
            StudentWordProgress.student_id == student_id,
            StudentWordProgress.is_stranger == True
        ).order_by(
            desc(StudentWordProgress.updated_at),
            desc(StudentWordProgress.id)
        ).all()
    
    def count_stranger_words(self, student_id: int) -> int:
        """陌生单词数量"""
        return self.count_by(student_id=student_id, is_stranger=True)
    
    def count_mastered_words(self, student_id: int) -> int:
        """已掌握单词数量"""
        return self.count_by(student_id=student_id, status=ProgressStatus.MASTERED.value)
