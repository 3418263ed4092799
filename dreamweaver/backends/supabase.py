"""
Supabase backend.

Operations are extension points that are not wired yet: reads return
empty results, writes and sync do nothing.  Reachability is real.
"""

from typing import Optional

import httpx

from dreamweaver.backends.remote import is_reachable, not_implemented
from dreamweaver.core.config import settings
from dreamweaver.db.repositories.base import Updates
from dreamweaver.schemas.backend import DatabaseConfig
from dreamweaver.schemas.coaching_insight import CoachingInsight
from dreamweaver.schemas.journal_entry import JournalEntry
from dreamweaver.schemas.sleep_session import SleepSession
from dreamweaver.schemas.user import User


class SupabaseDatabase:
    """Database operations against a Supabase project."""

    provider = "supabase"

    def __init__(self, config: DatabaseConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self.transport = transport

    @property
    def rest_url(self) -> Optional[str]:
        if not self.config.api_url:
            return None
        return f"{self.config.api_url.rstrip('/')}/rest/v1/"

    async def get_user(self) -> Optional[User]:
        not_implemented("Supabase", "user query")
        return None

    async def set_user(self, user: User) -> None:
        not_implemented("Supabase", "user save")

    async def update_user(self, updates: Updates) -> None:
        not_implemented("Supabase", "user update")

    async def get_all_sessions(self) -> list[SleepSession]:
        not_implemented("Supabase", "sleep sessions query")
        return []

    async def add_session(self, session: SleepSession) -> None:
        not_implemented("Supabase", "sleep session save")

    async def update_session(self, session_id: str, updates: Updates) -> None:
        not_implemented("Supabase", "sleep session update")

    async def delete_session(self, session_id: str) -> None:
        not_implemented("Supabase", "sleep session delete")

    async def get_all_entries(self) -> list[JournalEntry]:
        not_implemented("Supabase", "journal entries query")
        return []

    async def add_entry(self, entry: JournalEntry) -> None:
        not_implemented("Supabase", "journal entry save")

    async def update_entry(self, entry_id: str, updates: Updates) -> None:
        not_implemented("Supabase", "journal entry update")

    async def delete_entry(self, entry_id: str) -> None:
        not_implemented("Supabase", "journal entry delete")

    async def get_all_insights(self) -> list[CoachingInsight]:
        not_implemented("Supabase", "coaching insights query")
        return []

    async def add_insight(self, insight: CoachingInsight) -> None:
        not_implemented("Supabase", "coaching insight save")

    async def update_insight(self, insight_id: str, updates: Updates) -> None:
        not_implemented("Supabase", "coaching insight update")

    async def delete_insight(self, insight_id: str) -> None:
        not_implemented("Supabase", "coaching insight delete")

    async def sync(self) -> bool:
        not_implemented("Supabase", "sync")
        return False

    async def is_online(self) -> bool:
        headers = {"apikey": self.config.api_key} if self.config.api_key else None
        return await is_reachable(self.rest_url, settings.ONLINE_CHECK_TIMEOUT_SECONDS, headers=headers,
                                  transport=self.transport, )
