"""Tests for the local backend: async delegation to the repositories."""

import datetime

import pytest
from pydantic import ValidationError

from dreamweaver.backends.base import DatabaseOperations
from dreamweaver.backends.local import LocalDatabase
from dreamweaver.schemas.coaching_insight import CoachingInsight
from dreamweaver.schemas.journal_entry import JournalEntry
from dreamweaver.schemas.sleep_session import SleepSession
from dreamweaver.schemas.user import User

pytestmark = pytest.mark.anyio

UTC = datetime.timezone.utc
NOW = datetime.datetime(2024, 5, 1, 7, tzinfo=UTC)


@pytest.fixture
def database(storage):
    return LocalDatabase(storage)


def _session(session_id: str = "s1") -> SleepSession:
    return SleepSession(session_id=session_id, user_id="u1", start_time=NOW - datetime.timedelta(hours=8),
                        end_time=NOW, quality_score=75)


class TestLocalDatabase:
    async def test_satisfies_protocol(self, database):
        assert isinstance(database, DatabaseOperations)
        assert database.provider == "local"

    async def test_user_operations(self, database, storage):
        assert await database.get_user() is None
        await database.set_user(User(user_id="u1", display_name="Ada", created_at=NOW))
        await database.update_user({"display_name": "Ada L."})
        assert (await database.get_user()).display_name == "Ada L."
        assert storage.users.get().display_name == "Ada L."

    async def test_session_operations(self, database, storage):
        await database.add_session(_session("s1"))
        await database.add_session(_session("s2"))
        await database.update_session("s1", {"notes": "restless"})
        await database.delete_session("s2")

        sessions = await database.get_all_sessions()
        assert [s.session_id for s in sessions] == ["s1"]
        assert sessions[0].notes == "restless"
        assert storage.sleep_sessions.get_all() == sessions

    async def test_entry_operations(self, database):
        await database.add_entry(JournalEntry(entry_id="e1", user_id="u1", entry_type="post", created_at=NOW))
        await database.update_entry("e1", {"feelings_log": "rested"})
        assert (await database.get_all_entries())[0].feelings_log == "rested"
        await database.delete_entry("e1")
        assert await database.get_all_entries() == []

    async def test_insight_operations(self, database):
        await database.add_insight(CoachingInsight(insight_id="i1", user_id="u1", recommendation="Dim the lights.",
                                                   generated_at=NOW))
        await database.update_insight("i1", {"recommendation": "Dim the lights earlier."})
        assert (await database.get_all_insights())[0].recommendation == "Dim the lights earlier."
        await database.delete_insight("i1")
        await database.delete_insight("i1")
        assert await database.get_all_insights() == []

    async def test_invalid_merge_raises_and_writes_nothing(self, database, storage):
        await database.add_session(_session("s1"))
        with pytest.raises(ValidationError):
            await database.update_session("s1", {"quality_score": 500})
        assert storage.sleep_sessions.get_by_id("s1").quality_score == 75

    async def test_sync_is_noop_and_always_online(self, database, storage):
        await database.add_session(_session())
        assert await database.sync() is False
        assert await database.is_online() is True
        assert len(storage.sleep_sessions.get_all()) == 1
