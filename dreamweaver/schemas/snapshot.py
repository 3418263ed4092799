"""
Snapshot document schema.

One transportable JSON document holding the full entity graph.  Every
section is optional on import; a missing (or null) section leaves the
corresponding store untouched.
"""

import datetime
from typing import Optional

from pydantic import Field

from dreamweaver.schemas.base import CamelModel, Instant, utcnow
from dreamweaver.schemas.coaching_insight import CoachingInsight
from dreamweaver.schemas.journal_entry import JournalEntry
from dreamweaver.schemas.preferences import AppSettings, UserPreferences
from dreamweaver.schemas.sleep_session import SleepSession
from dreamweaver.schemas.user import User


class SnapshotDocument(CamelModel):
    """Full-state export."""

    user: Optional[User] = None
    sleep_sessions: Optional[list[SleepSession]] = None
    journal_entries: Optional[list[JournalEntry]] = None
    coaching_insights: Optional[list[CoachingInsight]] = None
    preferences: Optional[UserPreferences] = None
    settings: Optional[AppSettings] = None
    export_date: Instant = Field(default_factory=utcnow)

    @property
    def filename(self) -> str:
        """Download filename, ``dreamweaver-backup-<ISO-date>.json``."""
        return backup_filename(self.export_date)


def backup_filename(when: datetime.datetime) -> str:
    return f"dreamweaver-backup-{when.date().isoformat()}.json"
