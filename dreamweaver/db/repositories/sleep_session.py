"""
Sleep session repository.
"""

import datetime
from typing import Iterable, Optional

from dreamweaver.db.kv_store import StorageKeys
from dreamweaver.db.repositories.base import CollectionRepository, in_range
from dreamweaver.schemas.sleep_session import SleepSession

_EARLIEST = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)
_LATEST = datetime.datetime.max.replace(tzinfo=datetime.timezone.utc)


def sessions_starting_between(sessions: Iterable[SleepSession], start: Optional[datetime.datetime] = None,
                              end: Optional[datetime.datetime] = None, ) -> list[SleepSession]:
    """Sessions whose ``start_time`` lies within ``[start, end]``; a missing bound is open."""
    lower = start or _EARLIEST
    upper = end or _LATEST
    return [session for session in sessions if in_range(session.start_time, lower, upper)]


class SleepSessionRepository(CollectionRepository[SleepSession]):
    """Repository for SleepSession records."""

    key = StorageKeys.SLEEP_SESSIONS
    model = SleepSession
    id_field = "session_id"

    def get_by_date_range(self, start: datetime.datetime, end: datetime.datetime) -> list[SleepSession]:
        return sessions_starting_between(self.get_all(), start, end)
