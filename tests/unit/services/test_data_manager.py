"""Tests for the data manager facade over the local backend."""

import datetime

import pytest

from dreamweaver.backends.local import LocalDatabase
from dreamweaver.schemas.coaching_insight import CoachingInsight
from dreamweaver.schemas.journal_entry import JournalEntry
from dreamweaver.schemas.sleep_session import SleepSession, SleepSessionEnd
from dreamweaver.schemas.user import User, UserUpdate
from dreamweaver.services.data_manager import DataManager

pytestmark = pytest.mark.anyio

UTC = datetime.timezone.utc
DAY = datetime.datetime(2024, 5, 10, tzinfo=UTC)


@pytest.fixture
def manager(storage):
    return DataManager(LocalDatabase(storage))


# ======================================================================
# Helpers
# ======================================================================


def _session(session_id: str, start: datetime.datetime, hours: float = 8, quality: int = 80) -> SleepSession:
    return SleepSession(session_id=session_id, user_id="u1", start_time=start,
                        end_time=start + datetime.timedelta(hours=hours), quality_score=quality)


def _entry(entry_id: str, session_id: str, entry_type: str, created_at: datetime.datetime = DAY) -> JournalEntry:
    return JournalEntry(entry_id=entry_id, user_id="u1", session_id=session_id, entry_type=entry_type,
                        created_at=created_at)


def _insight(insight_id: str, generated_at: datetime.datetime) -> CoachingInsight:
    return CoachingInsight(insight_id=insight_id, user_id="u1", recommendation="Rest.", generated_at=generated_at)


# ======================================================================
# User
# ======================================================================


class TestUser:
    async def test_save_and_update(self, manager):
        assert await manager.get_current_user() is None
        await manager.save_user(User(user_id="u1", display_name="Ada", created_at=DAY))
        user = await manager.update_user(UserUpdate(farcaster_id="fc-9"))
        assert user.farcaster_id == "fc-9"
        assert user.display_name == "Ada"

    async def test_update_without_user(self, manager):
        assert await manager.update_user({"display_name": "Nobody"}) is None


# ======================================================================
# Sleep sessions
# ======================================================================


class TestSleepSessions:
    async def test_range_filter_is_inclusive(self, manager):
        for index, offset in enumerate([0, 1, 2, 3]):
            await manager.save_sleep_session(_session(f"s{index}", DAY + datetime.timedelta(days=offset)))

        sessions = await manager.get_sleep_sessions(DAY + datetime.timedelta(days=1),
                                                    DAY + datetime.timedelta(days=2))
        assert [s.session_id for s in sessions] == ["s1", "s2"]

    async def test_open_ended_ranges(self, manager):
        await manager.save_sleep_session(_session("early", DAY))
        await manager.save_sleep_session(_session("late", DAY + datetime.timedelta(days=5)))

        assert [s.session_id for s in await manager.get_sleep_sessions(start=DAY + datetime.timedelta(days=1))] == [
            "late"]
        assert [s.session_id for s in await manager.get_sleep_sessions(end=DAY)] == ["early"]
        assert len(await manager.get_sleep_sessions()) == 2

    async def test_naive_bounds_are_treated_as_utc(self, manager):
        await manager.save_sleep_session(_session("s1", DAY))
        await manager.save_sleep_session(_session("s2", DAY + datetime.timedelta(days=2)))

        sessions = await manager.get_sleep_sessions(datetime.datetime(2024, 5, 10), datetime.datetime(2024, 5, 11))
        assert [s.session_id for s in sessions] == ["s1"]
        assert [s.session_id for s in await manager.get_sleep_sessions(start=datetime.datetime(2024, 5, 11))] == [
            "s2"]

    async def test_update_unknown_returns_none(self, manager):
        assert await manager.update_sleep_session("missing", {"notes": "x"}) is None

    async def test_end_session_scores_when_quality_missing(self, manager):
        await manager.save_sleep_session(SleepSession(session_id="s1", user_id="u1", start_time=DAY, end_time=DAY,
                                                      quality_score=0))
        ended = await manager.end_sleep_session("s1", SleepSessionEnd(end_time=DAY + datetime.timedelta(hours=8),
                                                                      activities=["exercise", "caffeine"],
                                                                      notes="ok"))
        assert ended.quality_score == 80
        assert ended.duration_minutes == 480
        assert ended.notes == "ok"

    async def test_end_session_keeps_explicit_quality(self, manager):
        await manager.save_sleep_session(_session("s1", DAY, hours=0, quality=0))
        ended = await manager.end_sleep_session("s1", SleepSessionEnd(end_time=DAY + datetime.timedelta(hours=6),
                                                                      quality_score=33))
        assert ended.quality_score == 33

    async def test_end_unknown_session(self, manager):
        assert await manager.end_sleep_session("missing", SleepSessionEnd()) is None


# ======================================================================
# Journal entries and insights
# ======================================================================


class TestJournalEntries:
    async def test_filters_combine(self, manager):
        await manager.save_journal_entry(_entry("e1", "s1", "pre"))
        await manager.save_journal_entry(_entry("e2", "s1", "post"))
        await manager.save_journal_entry(_entry("e3", "s2", "post"))

        assert [e.entry_id for e in await manager.get_journal_entries(session_id="s1")] == ["e1", "e2"]
        assert [e.entry_id for e in await manager.get_journal_entries(entry_type="post")] == ["e2", "e3"]
        assert [e.entry_id for e in await manager.get_journal_entries("s1", "post")] == ["e2"]

    async def test_get_and_delete(self, manager):
        await manager.save_journal_entry(_entry("e1", "s1", "pre"))
        assert (await manager.get_journal_entry("e1")).entry_type == "pre"
        await manager.delete_journal_entry("e1")
        assert await manager.get_journal_entry("e1") is None


class TestCoachingInsights:
    async def test_limit_returns_most_recent_first(self, manager):
        await manager.save_coaching_insight(_insight("old", DAY))
        await manager.save_coaching_insight(_insight("new", DAY + datetime.timedelta(days=2)))
        await manager.save_coaching_insight(_insight("mid", DAY + datetime.timedelta(days=1)))

        assert [i.insight_id for i in await manager.get_coaching_insights()] == ["old", "new", "mid"]
        assert [i.insight_id for i in await manager.get_coaching_insights(limit=2)] == ["new", "mid"]

    async def test_limit_keeps_insertion_order_for_ties(self, manager):
        await manager.save_coaching_insight(_insight("first", DAY))
        await manager.save_coaching_insight(_insight("second", DAY))
        await manager.save_coaching_insight(_insight("older", DAY - datetime.timedelta(days=1)))
        assert [i.insight_id for i in await manager.get_coaching_insights(limit=3)] == ["first", "second", "older"]

    async def test_update(self, manager):
        await manager.save_coaching_insight(_insight("i1", DAY))
        updated = await manager.update_coaching_insight("i1", {"session_id": "s1"})
        assert updated.session_id == "s1"


# ======================================================================
# Sync and analytics
# ======================================================================


class TestStats:
    async def test_sleep_stats(self, manager):
        await manager.save_sleep_session(_session("s1", DAY, hours=8, quality=90))
        await manager.save_sleep_session(_session("s2", DAY + datetime.timedelta(days=1), hours=6, quality=60))
        await manager.save_sleep_session(_session("outside", DAY + datetime.timedelta(days=30), quality=10))
        await manager.save_journal_entry(_entry("e1", "s1", "pre"))
        await manager.save_journal_entry(_entry("e2", "s1", "post", DAY - datetime.timedelta(days=3)))

        stats = await manager.get_sleep_stats(DAY, DAY + datetime.timedelta(days=7))
        assert stats.total_sessions == 2
        assert stats.average_duration == 420
        assert stats.average_quality == 75
        assert stats.total_journal_entries == 1

    async def test_stats_with_naive_bounds(self, manager):
        await manager.save_sleep_session(_session("s1", DAY, hours=8, quality=90))
        await manager.save_journal_entry(_entry("e1", "s1", "pre"))

        stats = await manager.get_sleep_stats(datetime.datetime(2024, 5, 10), datetime.datetime(2024, 5, 17))
        assert stats.total_sessions == 1
        assert stats.total_journal_entries == 1

    async def test_empty_range(self, manager):
        stats = await manager.get_sleep_stats(DAY, DAY + datetime.timedelta(days=7))
        assert stats.total_sessions == 0
        assert stats.average_duration == 0.0
        assert stats.average_quality == 0.0

    async def test_sync_with_local_backend(self, manager):
        assert await manager.sync_data() is False
