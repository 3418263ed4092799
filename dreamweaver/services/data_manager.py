"""
Data manager.

Facade the API layer talks to.  Every call goes through the active
backend; filters run over its results with the same helpers the local
repositories use.
"""

import datetime
from typing import Optional

from dreamweaver.backends.base import DatabaseOperations
from dreamweaver.db.repositories.base import Updates, in_range
from dreamweaver.db.repositories.coaching_insight import most_recent
from dreamweaver.db.repositories.journal_entry import filter_entries
from dreamweaver.db.repositories.sleep_session import sessions_starting_between
from dreamweaver.schemas.backend import SleepStats
from dreamweaver.schemas.base import utcnow
from dreamweaver.schemas.coaching_insight import CoachingInsight
from dreamweaver.schemas.journal_entry import EntryType, JournalEntry
from dreamweaver.schemas.sleep_session import SleepSession, SleepSessionEnd
from dreamweaver.schemas.user import User
from dreamweaver.services.sleep_scoring import calculate_sleep_quality


class DataManager:
    """User, sleep, journal and insight operations over one backend."""

    def __init__(self, database: DatabaseOperations):
        self.db = database

    # ------------------------------------------------------------------
    # User
    # ------------------------------------------------------------------

    async def get_current_user(self) -> Optional[User]:
        return await self.db.get_user()

    async def save_user(self, user: User) -> None:
        await self.db.set_user(user)

    async def update_user(self, updates: Updates) -> Optional[User]:
        await self.db.update_user(updates)
        return await self.db.get_user()

    # ------------------------------------------------------------------
    # Sleep sessions
    # ------------------------------------------------------------------

    async def get_sleep_sessions(self, start: Optional[datetime.datetime] = None,
                                 end: Optional[datetime.datetime] = None, ) -> list[SleepSession]:
        """All sessions, or those starting within the inclusive range."""
        return sessions_starting_between(await self.db.get_all_sessions(), start, end)

    async def get_sleep_session(self, session_id: str) -> Optional[SleepSession]:
        sessions = await self.db.get_all_sessions()
        return next((session for session in sessions if session.session_id == session_id), None)

    async def save_sleep_session(self, session: SleepSession) -> None:
        await self.db.add_session(session)

    async def update_sleep_session(self, session_id: str, updates: Updates) -> Optional[SleepSession]:
        await self.db.update_session(session_id, updates)
        return await self.get_sleep_session(session_id)

    async def delete_sleep_session(self, session_id: str) -> None:
        await self.db.delete_session(session_id)

    async def end_sleep_session(self, session_id: str, data: SleepSessionEnd) -> Optional[SleepSession]:
        """Close an open session, scoring it when no quality is given."""
        session = await self.get_sleep_session(session_id)
        if session is None:
            return None

        end_time = data.end_time or utcnow()
        quality = data.quality_score
        if quality is None:
            duration = int((end_time - session.start_time).total_seconds() // 60)
            quality = calculate_sleep_quality(duration, data.activities)

        updates = {"end_time": end_time, "quality_score": quality}
        if data.notes is not None:
            updates["notes"] = data.notes
        return await self.update_sleep_session(session_id, updates)

    # ------------------------------------------------------------------
    # Journal entries
    # ------------------------------------------------------------------

    async def get_journal_entries(self, session_id: Optional[str] = None,
                                  entry_type: Optional[EntryType] = None, ) -> list[JournalEntry]:
        return filter_entries(await self.db.get_all_entries(), session_id, entry_type)

    async def get_journal_entry(self, entry_id: str) -> Optional[JournalEntry]:
        entries = await self.db.get_all_entries()
        return next((entry for entry in entries if entry.entry_id == entry_id), None)

    async def save_journal_entry(self, entry: JournalEntry) -> None:
        await self.db.add_entry(entry)

    async def update_journal_entry(self, entry_id: str, updates: Updates) -> Optional[JournalEntry]:
        await self.db.update_entry(entry_id, updates)
        return await self.get_journal_entry(entry_id)

    async def delete_journal_entry(self, entry_id: str) -> None:
        await self.db.delete_entry(entry_id)

    # ------------------------------------------------------------------
    # Coaching insights
    # ------------------------------------------------------------------

    async def get_coaching_insights(self, limit: Optional[int] = None) -> list[CoachingInsight]:
        """Insights in insertion order, or the *limit* most recent."""
        insights = await self.db.get_all_insights()
        if limit is None:
            return insights
        return most_recent(insights, limit)

    async def get_coaching_insight(self, insight_id: str) -> Optional[CoachingInsight]:
        insights = await self.db.get_all_insights()
        return next((insight for insight in insights if insight.insight_id == insight_id), None)

    async def save_coaching_insight(self, insight: CoachingInsight) -> None:
        await self.db.add_insight(insight)

    async def update_coaching_insight(self, insight_id: str, updates: Updates) -> Optional[CoachingInsight]:
        await self.db.update_insight(insight_id, updates)
        return await self.get_coaching_insight(insight_id)

    async def delete_coaching_insight(self, insight_id: str) -> None:
        await self.db.delete_insight(insight_id)

    # ------------------------------------------------------------------
    # Sync and analytics
    # ------------------------------------------------------------------

    async def sync_data(self) -> bool:
        if not await self.db.is_online():
            return False
        return await self.db.sync()

    async def get_sleep_stats(self, start: datetime.datetime, end: datetime.datetime) -> SleepStats:
        sessions = await self.get_sleep_sessions(start, end)
        entries = await self.db.get_all_entries()

        total = len(sessions)
        average_duration = sum(session.duration_minutes for session in sessions) / total if total else 0.0
        average_quality = sum(session.quality_score for session in sessions) / total if total else 0.0
        journal_count = sum(1 for entry in entries if in_range(entry.created_at, start, end))

        return SleepStats(total_sessions=total, average_duration=average_duration, average_quality=average_quality,
                          total_journal_entries=journal_count, )
