from sqlalchemy import Column, String, Integer, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import BaseModel

"""
单词包模型  
老师整理的一组有序单词，附带中英文故事。WordSetWord 记录单词在包内的顺序。
"""


class WordSet(BaseModel):
    __tablename__ = "word_sets"

    name = Column(String(100), nullable=False)
    description = Column(Text)
    story_en = Column(Text)
    story_zh = Column(Text)
    created_by_user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    created_by = relationship("User")
    words = relationship(
        "WordSetWord",
        back_populates="word_set",
        order_by="WordSetWord.order_index",
        cascade="all, delete-orphan",
    )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "story_en": self.story_en,
            "story_zh": self.story_zh,
            "created_by_user_id": self.created_by_user_id,
            "words": [link.word.to_dict() for link in self.words],
            "created_at": self.created_at.isoformat() if self.created_at else None
        }


class WordSetWord(BaseModel):
    __tablename__ = "word_set_words"
    __table_args__ = (UniqueConstraint("word_set_id", "word_id", name="uq_word_set_word"),)

    word_set_id = Column(Integer, ForeignKey("word_sets.id"), nullable=False)
    word_id = Column(Integer, ForeignKey("words.id"), nullable=False)
    order_index = Column(Integer, nullable=False, default=0)

    word_set = relationship("WordSet", back_populates="words")
    word = relationship("Word")
