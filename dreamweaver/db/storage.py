"""
Local storage bundle.

Groups every repository and store built on one key-value store.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine

from dreamweaver.db.kv_store import KeyValueStore
from dreamweaver.db.repositories import (
    AppSettingsStore,
    CoachingInsightRepository,
    JournalEntryRepository,
    SleepSessionRepository,
    UserPreferencesStore,
    UserRepository,
)


@dataclass
class LocalStorage:
    """The six local stores sharing one durable medium."""

    store: KeyValueStore
    users: UserRepository
    sleep_sessions: SleepSessionRepository
    journal_entries: JournalEntryRepository
    coaching_insights: CoachingInsightRepository
    preferences: UserPreferencesStore
    settings: AppSettingsStore

    @classmethod
    def from_store(cls, store: KeyValueStore) -> "LocalStorage":
        return cls(store=store, users=UserRepository(store), sleep_sessions=SleepSessionRepository(store),
                   journal_entries=JournalEntryRepository(store), coaching_insights=CoachingInsightRepository(store),
                   preferences=UserPreferencesStore(store), settings=AppSettingsStore(store), )

    @classmethod
    def from_engine(cls, engine: Optional[Engine]) -> "LocalStorage":
        return cls.from_store(KeyValueStore(engine))

    def clear(self) -> None:
        """Remove every persisted key."""
        self.store.clear()
