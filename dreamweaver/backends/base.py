"""
Database operations interface.

Every backend (local or remote provider) satisfies this protocol on its
own; there is no shared base class.  All methods are coroutines, including
those of backends whose work is synchronous.

Backends never raise for an operation they have not wired yet: reads
return an empty or absent result and writes do nothing.

One exception is surfaced to callers: an update whose merged record fails
validation raises :class:`pydantic.ValidationError` and writes nothing.
Remote implementations validate the merge the same way before sending it.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from dreamweaver.db.repositories.base import Updates
from dreamweaver.schemas.coaching_insight import CoachingInsight
from dreamweaver.schemas.journal_entry import JournalEntry
from dreamweaver.schemas.sleep_session import SleepSession
from dreamweaver.schemas.user import User


@runtime_checkable
class DatabaseOperations(Protocol):
    provider: str

    # User
    async def get_user(self) -> Optional[User]:
        ...

    async def set_user(self, user: User) -> None:
        ...

    async def update_user(self, updates: Updates) -> None:
        ...

    # Sleep sessions
    async def get_all_sessions(self) -> list[SleepSession]:
        ...

    async def add_session(self, session: SleepSession) -> None:
        ...

    async def update_session(self, session_id: str, updates: Updates) -> None:
        ...

    async def delete_session(self, session_id: str) -> None:
        ...

    # Journal entries
    async def get_all_entries(self) -> list[JournalEntry]:
        ...

    async def add_entry(self, entry: JournalEntry) -> None:
        ...

    async def update_entry(self, entry_id: str, updates: Updates) -> None:
        ...

    async def delete_entry(self, entry_id: str) -> None:
        ...

    # Coaching insights
    async def get_all_insights(self) -> list[CoachingInsight]:
        ...

    async def add_insight(self, insight: CoachingInsight) -> None:
        ...

    async def update_insight(self, insight_id: str, updates: Updates) -> None:
        ...

    async def delete_insight(self, insight_id: str) -> None:
        ...

    # Sync
    async def sync(self) -> bool:
        """Synchronize with the remote side.  Returns ``True`` only when
        data was actually exchanged."""
        ...

    async def is_online(self) -> bool:
        ...
