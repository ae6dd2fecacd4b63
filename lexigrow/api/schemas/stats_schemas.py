from pydantic import BaseModel
from typing import Dict, Optional
from datetime import datetime

class StudentStatsResponse(BaseModel):
    student_id: int
    name: str
    created_at: Optional[datetime] = None
    total_logs: int
    known_logs: int
    unknown_logs: int
    action_counts: Dict[str, int]
    mastered_words: int
    stranger_words: int
    last_activity: Optional[datetime] = None
    level: Optional[int] = None
    xp: Optional[int] = None
