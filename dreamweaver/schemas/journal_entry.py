"""
Journal entry schemas.

``session_id`` is a soft reference; it is never checked against the
stored sleep sessions.
"""

from typing import Any, Literal, Optional

from pydantic import Field

from dreamweaver.schemas.base import CamelModel, Instant, new_id, utcnow

EntryType = Literal["pre", "post"]


class JournalEntry(CamelModel):
    """A pre-sleep or post-sleep journal entry."""

    entry_id: str
    user_id: str
    session_id: Optional[str] = None
    entry_type: EntryType
    habits_log: dict[str, Any] = Field(default_factory=dict)
    feelings_log: str = ""
    created_at: Instant


class JournalEntryCreate(CamelModel):
    """Schema for submitting a journal entry."""

    entry_id: str = Field(default_factory=new_id)
    user_id: str
    session_id: Optional[str] = None
    entry_type: EntryType
    habits_log: dict[str, Any] = Field(default_factory=dict)
    feelings_log: str = Field("", max_length=5000)
    created_at: Instant = Field(default_factory=utcnow)

    def to_entity(self) -> JournalEntry:
        return JournalEntry(**self.model_dump())


class JournalEntryUpdate(CamelModel):
    """Schema for a partial journal entry update."""

    session_id: Optional[str] = None
    entry_type: Optional[EntryType] = None
    habits_log: Optional[dict[str, Any]] = None
    feelings_log: Optional[str] = Field(None, max_length=5000)
