"""
Local backend.

Delegates straight to the key-value backed repositories.  There is no
remote side: ``sync`` exchanges nothing and the backend is always online.
"""

from typing import Optional

from dreamweaver.db.repositories.base import Updates
from dreamweaver.db.storage import LocalStorage
from dreamweaver.schemas.coaching_insight import CoachingInsight
from dreamweaver.schemas.journal_entry import JournalEntry
from dreamweaver.schemas.sleep_session import SleepSession
from dreamweaver.schemas.user import User


class LocalDatabase:
    """Database operations on local storage."""

    provider = "local"

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    async def get_user(self) -> Optional[User]:
        return self.storage.users.get()

    async def set_user(self, user: User) -> None:
        self.storage.users.set(user)

    async def update_user(self, updates: Updates) -> None:
        self.storage.users.update(updates)

    async def get_all_sessions(self) -> list[SleepSession]:
        return self.storage.sleep_sessions.get_all()

    async def add_session(self, session: SleepSession) -> None:
        self.storage.sleep_sessions.add(session)

    async def update_session(self, session_id: str, updates: Updates) -> None:
        self.storage.sleep_sessions.update(session_id, updates)

    async def delete_session(self, session_id: str) -> None:
        self.storage.sleep_sessions.delete(session_id)

    async def get_all_entries(self) -> list[JournalEntry]:
        return self.storage.journal_entries.get_all()

    async def add_entry(self, entry: JournalEntry) -> None:
        self.storage.journal_entries.add(entry)

    async def update_entry(self, entry_id: str, updates: Updates) -> None:
        self.storage.journal_entries.update(entry_id, updates)

    async def delete_entry(self, entry_id: str) -> None:
        self.storage.journal_entries.delete(entry_id)

    async def get_all_insights(self) -> list[CoachingInsight]:
        return self.storage.coaching_insights.get_all()

    async def add_insight(self, insight: CoachingInsight) -> None:
        self.storage.coaching_insights.add(insight)

    async def update_insight(self, insight_id: str, updates: Updates) -> None:
        self.storage.coaching_insights.update(insight_id, updates)

    async def delete_insight(self, insight_id: str) -> None:
        self.storage.coaching_insights.delete(insight_id)

    async def sync(self) -> bool:
        return False

    async def is_online(self) -> bool:
        return True
