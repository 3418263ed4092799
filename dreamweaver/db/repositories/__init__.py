"""Key-value backed repositories."""

from dreamweaver.db.repositories.user import UserRepository
from dreamweaver.db.repositories.sleep_session import SleepSessionRepository
from dreamweaver.db.repositories.journal_entry import JournalEntryRepository
from dreamweaver.db.repositories.coaching_insight import CoachingInsightRepository
from dreamweaver.db.repositories.preferences import AppSettingsStore, UserPreferencesStore

__all__ = [
    "UserRepository",
    "SleepSessionRepository",
    "JournalEntryRepository",
    "CoachingInsightRepository",
    "UserPreferencesStore",
    "AppSettingsStore",
]
