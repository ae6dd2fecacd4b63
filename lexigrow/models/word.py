from sqlalchemy import Column, String, Text
from .base import BaseModel

"""
单词模型  
老师录入的词汇，包括单词、音标、词性、中英文释义、例句、音节拆分、词根和助记。
"""

class Word(BaseModel):
    __tablename__ = "words"

    text = Column(String(100), nullable=False, index=True)
    phonetic = Column(String(100))
    pos = Column(String(50))  # 词性，例如 adj.
    meaning_en = Column(Text)
    meaning_zh = Column(Text)
    example_en = Column(Text)
    example_zh = Column(Text)
    syllables = Column(String(200))  # 例如 re-sil-ient
    word_roots = Column(Text)
    mnemonics = Column(Text)
    
    def to_dict(self):
        return {
            "id": self.id,
            "text": self.text,
            "phonetic": self.phonetic,
            "pos": self.pos,
            "meaning_en": self.meaning_en,
            "meaning_zh": self.meaning_zh,
            "example_en": self.example_en,
            "example_zh": self.example_zh,
            "syllables": self.syllables,
            "word_roots": self.word_roots,
            "mnemonics": self.mnemonics,
            "created_at": self.created_at.isoformat() if self.created_at else None
        }
