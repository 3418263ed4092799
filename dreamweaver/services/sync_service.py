"""
Sync bookkeeping.

Tracks ``last_sync_date`` inside the app settings.  Local state is always
the source of truth: a sync only runs when the backend reports it is
online, and only a successful exchange moves ``last_sync_date``.  A
failed or skipped sync leaves all local data untouched.
"""

import datetime
import logging
from typing import Optional

from dreamweaver.backends.base import DatabaseOperations
from dreamweaver.db.repositories.preferences import AppSettingsStore
from dreamweaver.schemas.base import utcnow

logger = logging.getLogger(__name__)


class SyncService:
    """Sync orchestration for the active backend."""

    def __init__(self, database: DatabaseOperations, settings_store: AppSettingsStore):
        self.database = database
        self.settings_store = settings_store

    def get_last_sync_date(self) -> Optional[datetime.datetime]:
        return self.settings_store.get().last_sync_date

    def update_last_sync_date(self) -> datetime.datetime:
        now = utcnow()
        self.settings_store.update({"last_sync_date": now})
        return now

    async def sync(self) -> bool:
        """Run the backend sync and record success."""
        if not await self.database.is_online():
            logger.info("Backend %s offline, skipping sync", self.database.provider)
            return False
        if not await self.database.sync():
            logger.info("Backend %s had nothing to sync", self.database.provider)
            return False
        synced_at = self.update_last_sync_date()
        logger.info("Synced with %s at %s", self.database.provider, synced_at.isoformat())
        return True

    async def sync_to_cloud(self) -> bool:
        # TODO: push local snapshot once a remote backend implements writes
        logger.info("Cloud sync not yet implemented")
        return False

    async def sync_from_cloud(self) -> bool:
        logger.info("Cloud sync not yet implemented")
        return False
