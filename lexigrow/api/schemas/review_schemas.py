from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any
from datetime import datetime

from lexigrow.services.progress_service import ReviewOutcome
from lexigrow.api.schemas.student_schemas import ProfileResponse
from lexigrow.api.schemas.word_schemas import WordResponse

class ReviewRequest(BaseModel):
    outcome: ReviewOutcome
    request_id: Optional[str] = Field(default=None, max_length=64, description="幂等键，重复提交不会重复计分")

class ProgressResponse(BaseModel):
    id: int
    student_id: int
    word_id: int
    status: str
    is_stranger: bool
    familiarity_score: int
    correct_count: int
    wrong_count: int
    dont_know_count: int
    last_reviewed_at: Optional[datetime] = None
    next_review_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        from_attributes=True
    )

class ProgressLookupResponse(BaseModel):
    """没有学习记录时 progress 为空"""
    progress: Optional[ProgressResponse] = None

class StrangerWordResponse(ProgressResponse):
    word: WordResponse

class WordDetailResponse(BaseModel):
    word: Dict[str, Any]
    syllables: List[str]
    progress: Optional[ProgressResponse] = None
    profile: ProfileResponse
    stranger_count: int
