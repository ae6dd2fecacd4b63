from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime

class StudentCreate(BaseModel):
    name: str

class StudentResponse(BaseModel):
    id: int
    name: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        from_attributes=True
    )

class ProfileResponse(BaseModel):
    student_id: int
    level: int
    xp: int
    total_words_learned: int

    model_config = ConfigDict(
        from_attributes=True
    )

class XPEventResponse(BaseModel):
    id: int
    student_id: int
    points: int
    reason: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        from_attributes=True
    )

class ProfileOverviewResponse(BaseModel):
    student_id: int
    level: int
    xp: int
    xp_per_level: int
    total_words_learned: int
    mastered_count: int
    stranger_count: int
    recent_xp_events: List[XPEventResponse]
