from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime

class WordBase(BaseModel):
    text: str
    phonetic: Optional[str] = None
    pos: Optional[str] = None
    meaning_en: Optional[str] = None
    meaning_zh: Optional[str] = None
    example_en: Optional[str] = None
    example_zh: Optional[str] = None
    syllables: Optional[str] = None
    word_roots: Optional[str] = None
    mnemonics: Optional[str] = None

class WordCreate(WordBase):
    pass

class WordResponse(WordBase):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        from_attributes=True
    )

class WordSetCreate(BaseModel):
    name: str
    description: Optional[str] = None
    story_en: Optional[str] = None
    story_zh: Optional[str] = None
    word_ids: List[int] = []

class WordSetResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    story_en: Optional[str] = None
    story_zh: Optional[str] = None
    created_by_user_id: int
    words: List[WordResponse]
    created_at: Optional[datetime] = None
