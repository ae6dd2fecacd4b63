from typing import List
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import desc

from lexigrow.models.word_set import WordSet, WordSetWord
from lexigrow.repositories.base import BaseRepository


class WordSetRepository(BaseRepository[WordSet]):
    def __init__(self, db: Session):
        super().__init__(db, WordSet)
    
    def add_words(self, word_set: WordSet, word_ids: List[int]) -> None:
        """按给定顺序把单词加入单词包"""
        for index, word_id in enumerate(word_ids):
            self.db.add(WordSetWord(
                word_set_id=word_set.id,
                word_id=word_id,
                order_index=index
            ))
        self.db.flush()
    
    def list_word_sets(self) -> List[WordSet]:
        """获取所有单词包（最新的在前），预加载单词"""
        return self.db.query(WordSet).options(
            selectinload(WordSet.words).selectinload(WordSetWord.word)
        ).order_by(desc(WordSet.created_at), desc(WordSet.id)).all()
