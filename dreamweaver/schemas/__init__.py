"""Pydantic schemas for entities, requests and documents."""

from dreamweaver.schemas.backend import BackendStatus, DatabaseConfig, SleepStats, SyncResult
from dreamweaver.schemas.coaching_insight import (
    CoachingInsight,
    CoachingInsightCreate,
    CoachingInsightUpdate,
    InsightRequest,
)
from dreamweaver.schemas.journal_entry import JournalEntry, JournalEntryCreate, JournalEntryUpdate
from dreamweaver.schemas.preferences import (
    AppSettings,
    AppSettingsUpdate,
    UserPreferences,
    UserPreferencesUpdate,
)
from dreamweaver.schemas.sleep_session import (
    SleepSession,
    SleepSessionCreate,
    SleepSessionEnd,
    SleepSessionUpdate,
)
from dreamweaver.schemas.snapshot import SnapshotDocument
from dreamweaver.schemas.user import User, UserCreate, UserUpdate

__all__ = [
    "BackendStatus",
    "DatabaseConfig",
    "SleepStats",
    "SyncResult",
    "CoachingInsight",
    "CoachingInsightCreate",
    "CoachingInsightUpdate",
    "InsightRequest",
    "JournalEntry",
    "JournalEntryCreate",
    "JournalEntryUpdate",
    "AppSettings",
    "AppSettingsUpdate",
    "UserPreferences",
    "UserPreferencesUpdate",
    "SleepSession",
    "SleepSessionCreate",
    "SleepSessionEnd",
    "SleepSessionUpdate",
    "SnapshotDocument",
    "User",
    "UserCreate",
    "UserUpdate",
]
