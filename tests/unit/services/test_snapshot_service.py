"""Tests for snapshot export and import."""

import datetime
import json

import pytest

from dreamweaver.db.kv_store import StorageKeys
from dreamweaver.schemas.coaching_insight import CoachingInsight
from dreamweaver.schemas.journal_entry import JournalEntry
from dreamweaver.schemas.preferences import AppSettings, UserPreferences
from dreamweaver.schemas.sleep_session import SleepSession
from dreamweaver.schemas.snapshot import SnapshotDocument, backup_filename
from dreamweaver.schemas.user import User
from dreamweaver.services.snapshot_service import SnapshotService

UTC = datetime.timezone.utc
NIGHT = datetime.datetime(2024, 5, 1, 23, tzinfo=UTC)


@pytest.fixture
def service(storage):
    return SnapshotService(storage)


@pytest.fixture
def populated(storage):
    storage.users.set(User(user_id="u1", display_name="Ada", created_at=datetime.datetime(2024, 1, 1, tzinfo=UTC)))
    storage.sleep_sessions.add(SleepSession(session_id="s1", user_id="u1", start_time=NIGHT,
                                            end_time=NIGHT + datetime.timedelta(hours=8), quality_score=82,
                                            notes="slept well"))
    storage.journal_entries.add(JournalEntry(entry_id="e1", user_id="u1", session_id="s1", entry_type="pre",
                                             habits_log={"caffeine": False}, feelings_log="calm", created_at=NIGHT))
    storage.coaching_insights.add(CoachingInsight(insight_id="i1", user_id="u1", session_id="s1",
                                                  recommendation="Keep it up.", generated_at=NIGHT))
    storage.preferences.update({"theme": "light"})
    storage.settings.set(AppSettings(onboarding_completed=True,
                                     first_launch_date=datetime.datetime(2024, 1, 1, tzinfo=UTC)))
    return storage


# ======================================================================
# Export
# ======================================================================


class TestExport:
    def test_export_contains_every_section(self, service, populated):
        document = service.export_all()
        assert document.user.user_id == "u1"
        assert [s.session_id for s in document.sleep_sessions] == ["s1"]
        assert [e.entry_id for e in document.journal_entries] == ["e1"]
        assert [i.insight_id for i in document.coaching_insights] == ["i1"]
        assert document.preferences.theme == "light"
        assert document.settings.onboarding_completed is True
        assert document.export_date.tzinfo is not None

    def test_export_of_empty_storage(self, service):
        document = service.export_all()
        assert document.user is None
        assert document.sleep_sessions == []
        assert document.preferences == UserPreferences()

    def test_json_uses_persisted_field_names(self, service, populated):
        payload = json.loads(service.to_json(service.export_all()))
        assert set(payload) == {"user", "sleepSessions", "journalEntries", "coachingInsights", "preferences",
                                "settings", "exportDate"}
        assert payload["sleepSessions"][0]["qualityScore"] == 82
        assert payload["preferences"]["sleepGoals"]["targetDuration"] == 480

    def test_write_backup(self, service, populated, tmp_path):
        path = service.write_backup(tmp_path / "backups")
        assert path.parent == tmp_path / "backups"
        assert path.name.startswith("dreamweaver-backup-")
        assert path.name.endswith(".json")
        assert json.loads(path.read_text(encoding="utf-8"))["user"]["userId"] == "u1"

    def test_backup_filename(self):
        assert backup_filename(datetime.datetime(2024, 3, 9, 15, tzinfo=UTC)) == "dreamweaver-backup-2024-03-09.json"


# ======================================================================
# Import
# ======================================================================


class TestImport:
    def test_round_trip_restores_state(self, service, populated):
        exported = service.export_all()
        populated.clear()
        assert populated.users.get() is None

        assert service.import_all(service.to_json(exported)) is True

        restored = service.export_all()
        assert restored.model_dump(exclude={"export_date"}) == exported.model_dump(exclude={"export_date"})

    def test_import_overwrites_collections(self, service, populated):
        document = SnapshotDocument(sleep_sessions=[
            SleepSession(session_id="s9", user_id="u1", start_time=NIGHT, end_time=NIGHT, quality_score=10),
        ])
        assert service.import_all(document) is True
        assert [s.session_id for s in populated.sleep_sessions.get_all()] == ["s9"]

    def test_missing_sections_are_left_untouched(self, service, populated):
        assert service.import_all({"coachingInsights": [], "exportDate": "2024-05-02T08:00:00Z"}) is True
        assert populated.coaching_insights.get_all() == []
        assert populated.users.get().user_id == "u1"
        assert len(populated.sleep_sessions.get_all()) == 1
        assert populated.preferences.get().theme == "light"

    def test_malformed_json_is_rejected(self, service, populated, store):
        before = store.get(StorageKeys.SLEEP_SESSIONS)
        assert service.import_all("{not json") is False
        assert store.get(StorageKeys.SLEEP_SESSIONS) == before

    def test_invalid_record_rejects_whole_document(self, service, populated):
        document = {
            "user": {"userId": "u2", "displayName": "Grace", "createdAt": "2024-02-01T00:00:00Z"},
            "sleepSessions": [{"sessionId": "bad", "userId": "u2", "startTime": "2024-05-01T23:00:00Z",
                               "endTime": "2024-05-02T07:00:00Z", "qualityScore": 500}],
        }
        assert service.import_all(document) is False
        assert populated.users.get().user_id == "u1"
        assert [s.session_id for s in populated.sleep_sessions.get_all()] == ["s1"]
