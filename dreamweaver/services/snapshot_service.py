"""
Snapshot export / import.

Export assembles the full local state into one document.  Import parses
and validates the whole document before anything is written, so a bad
document leaves every store untouched.  Each section present in a valid
document overwrites its store wholesale; collections are replaced, not
merged.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import ValidationError

from dreamweaver.db.storage import LocalStorage
from dreamweaver.schemas.snapshot import SnapshotDocument

logger = logging.getLogger(__name__)

SnapshotInput = Union[SnapshotDocument, str, bytes, Mapping[str, Any]]


class SnapshotService:
    """Full-state export and restore for local storage."""

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def export_all(self) -> SnapshotDocument:
        return SnapshotDocument(user=self.storage.users.get(), sleep_sessions=self.storage.sleep_sessions.get_all(),
                                journal_entries=self.storage.journal_entries.get_all(),
                                coaching_insights=self.storage.coaching_insights.get_all(),
                                preferences=self.storage.preferences.get(), settings=self.storage.settings.get(), )

    @staticmethod
    def to_json(document: SnapshotDocument) -> str:
        return document.model_dump_json(by_alias=True, indent=2)

    def write_backup(self, directory: Union[str, Path]) -> Path:
        """
        Export into ``<directory>/dreamweaver-backup-<ISO-date>.json``.

        Returns:
            Path of the written file
        """
        document = self.export_all()
        target_dir = Path(directory)
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / document.filename
        path.write_text(self.to_json(document), encoding="utf-8")
        return path

    def import_all(self, document: SnapshotInput) -> bool:
        """
        Restore local state from a snapshot.

        Args:
            document: Parsed snapshot, JSON text, or a mapping

        Returns:
            True on success, False if the document could not be parsed
        """
        try:
            if isinstance(document, SnapshotDocument):
                snapshot = document
            elif isinstance(document, (str, bytes)):
                snapshot = SnapshotDocument.model_validate_json(document)
            else:
                snapshot = SnapshotDocument.model_validate(document)
        except ValidationError as exc:
            logger.error("Error importing data: %s", exc)
            return False

        if snapshot.user is not None:
            self.storage.users.set(snapshot.user)
        if snapshot.sleep_sessions is not None:
            self.storage.sleep_sessions.replace_all(snapshot.sleep_sessions)
        if snapshot.journal_entries is not None:
            self.storage.journal_entries.replace_all(snapshot.journal_entries)
        if snapshot.coaching_insights is not None:
            self.storage.coaching_insights.replace_all(snapshot.coaching_insights)
        if snapshot.preferences is not None:
            self.storage.preferences.set(snapshot.preferences)
        if snapshot.settings is not None:
            self.storage.settings.set(snapshot.settings)

        logger.info("Imported snapshot exported at %s", snapshot.export_date.isoformat())
        return True
