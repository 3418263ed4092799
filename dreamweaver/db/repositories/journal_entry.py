"""
Journal entry repository.
"""

import datetime
from typing import Iterable, Optional

from dreamweaver.db.kv_store import StorageKeys
from dreamweaver.db.repositories.base import CollectionRepository, in_range
from dreamweaver.schemas.journal_entry import EntryType, JournalEntry


def filter_entries(entries: Iterable[JournalEntry], session_id: Optional[str] = None,
                   entry_type: Optional[EntryType] = None, ) -> list[JournalEntry]:
    """Entries matching every filter given, in their original order."""
    return [
        entry for entry in entries
        if (session_id is None or entry.session_id == session_id)
        and (entry_type is None or entry.entry_type == entry_type)
    ]


class JournalEntryRepository(CollectionRepository[JournalEntry]):
    """Repository for JournalEntry records."""

    key = StorageKeys.JOURNAL_ENTRIES
    model = JournalEntry
    id_field = "entry_id"

    def get_by_session_id(self, session_id: str) -> list[JournalEntry]:
        return filter_entries(self.get_all(), session_id=session_id)

    def get_by_type(self, entry_type: EntryType) -> list[JournalEntry]:
        return filter_entries(self.get_all(), entry_type=entry_type)

    def get_by_date_range(self, start: datetime.datetime, end: datetime.datetime) -> list[JournalEntry]:
        """Entries whose ``created_at`` lies within ``[start, end]``."""
        return self._filter(lambda entry: in_range(entry.created_at, start, end))
