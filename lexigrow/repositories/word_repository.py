from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import asc, desc

from lexigrow.models.word import Word
from lexigrow.repositories.base import BaseRepository


class WordRepository(BaseRepository[Word]):
    def __init__(self, db: Session):
        super().__init__(db, Word)
    
    def list_words(self, limit: int, newest_first: bool = True) -> List[Word]:
        """按创建时间获取单词列表"""
        direction = desc if newest_first else asc
        return self.db.query(Word).order_by(
            direction(Word.created_at), direction(Word.id)
        ).limit(limit).all()
    
    def get_by_ids(self, word_ids: List[int]) -> List[Word]:
        """批量获取单词"""
        if not word_ids:
            return []
        return self.db.query(Word).filter(Word.id.in_(word_ids)).all()
