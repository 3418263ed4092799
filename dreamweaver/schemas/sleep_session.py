"""
Sleep session schemas.

``end_time`` is expected to be at or after ``start_time`` but is not
validated.  An in-progress session carries its start time as end time
until it is ended.
"""

from typing import Optional

from pydantic import Field

from dreamweaver.schemas.base import CamelModel, Instant, new_id


class SleepSession(CamelModel):
    """One night (or nap) of sleep."""

    session_id: str
    user_id: str
    start_time: Instant
    end_time: Instant
    quality_score: int = Field(..., ge=0, le=100)
    notes: Optional[str] = None

    @property
    def duration_minutes(self) -> int:
        """Whole minutes between start and end."""
        return int((self.end_time - self.start_time).total_seconds() // 60)


class SleepSessionCreate(CamelModel):
    """Schema for logging a sleep session."""

    session_id: str = Field(default_factory=new_id)
    user_id: str
    start_time: Instant
    end_time: Optional[Instant] = Field(None, description="Defaults to start_time for an open session")
    quality_score: int = Field(0, ge=0, le=100)
    notes: Optional[str] = Field(None, max_length=1000)

    def to_entity(self) -> SleepSession:
        data = self.model_dump()
        if data["end_time"] is None:
            data["end_time"] = data["start_time"]
        return SleepSession(**data)


class SleepSessionUpdate(CamelModel):
    """Schema for a partial sleep session update."""

    start_time: Optional[Instant] = None
    end_time: Optional[Instant] = None
    quality_score: Optional[int] = Field(None, ge=0, le=100)
    notes: Optional[str] = Field(None, max_length=1000)


class SleepSessionEnd(CamelModel):
    """Schema for ending an open sleep session."""

    end_time: Optional[Instant] = Field(None, description="Defaults to now")
    quality_score: Optional[int] = Field(None, ge=0, le=100, description="Computed when omitted")
    activities: list[str] = Field(default_factory=list, description="Activity keys used for scoring")
    notes: Optional[str] = Field(None, max_length=1000)
