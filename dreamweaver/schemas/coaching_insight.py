"""
Coaching insight schemas.
"""

from typing import Optional

from pydantic import Field

from dreamweaver.schemas.base import CamelModel, Instant, new_id, utcnow


class CoachingInsight(CamelModel):
    """A generated sleep recommendation."""

    insight_id: str
    user_id: str
    session_id: Optional[str] = None
    recommendation: str
    generated_at: Instant


class CoachingInsightCreate(CamelModel):
    """Schema for storing a coaching insight."""

    insight_id: str = Field(default_factory=new_id)
    user_id: str
    session_id: Optional[str] = None
    recommendation: str = Field(..., min_length=1)
    generated_at: Instant = Field(default_factory=utcnow)

    def to_entity(self) -> CoachingInsight:
        return CoachingInsight(**self.model_dump())


class CoachingInsightUpdate(CamelModel):
    """Schema for a partial coaching insight update."""

    session_id: Optional[str] = None
    recommendation: Optional[str] = Field(None, min_length=1)


class InsightRequest(CamelModel):
    """Input for generating an insight from a night of sleep."""

    user_id: str
    session_id: Optional[str] = None
    duration: int = Field(..., ge=0, description="Sleep duration in minutes")
    quality: int = Field(..., ge=0, le=100)
    pre_notes: str = ""
    post_notes: str = ""
    activities: list[str] = Field(default_factory=list)
