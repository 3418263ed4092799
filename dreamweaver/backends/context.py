"""
Backend context.

Holds the one active backend for the application's lifetime.  The context
is constructed explicitly by whatever composes the application and passed
to its consumers; the backend is created lazily as local on first access
and can be replaced at runtime.
"""

from __future__ import annotations

import logging
from typing import Optional

from dreamweaver.backends.base import DatabaseOperations
from dreamweaver.backends.registry import LOCAL_PROVIDER, create_database
from dreamweaver.core.config import Settings
from dreamweaver.db.storage import LocalStorage
from dreamweaver.schemas.backend import DatabaseConfig

logger = logging.getLogger(__name__)


class BackendContext:
    """Owner of local storage and the active backend."""

    def __init__(self, storage: LocalStorage, config: Optional[DatabaseConfig] = None):
        self.storage = storage
        self._config = config or DatabaseConfig(provider=LOCAL_PROVIDER)
        self._database: Optional[DatabaseOperations] = None

    @classmethod
    def from_settings(cls, settings: Settings, storage: LocalStorage) -> "BackendContext":
        config = DatabaseConfig(provider=settings.DATABASE_PROVIDER, api_url=settings.REMOTE_API_URL,
                                api_key=settings.REMOTE_API_KEY, project_id=settings.REMOTE_PROJECT_ID, )
        return cls(storage, config)

    @property
    def config(self) -> DatabaseConfig:
        return self._config

    @property
    def database(self) -> DatabaseOperations:
        if self._database is None:
            self._database = create_database(self._config, self.storage)
        return self._database

    def use(self, config: DatabaseConfig) -> DatabaseOperations:
        """Replace the active backend."""
        self._config = config
        self._database = create_database(config, self.storage)
        logger.info("Active backend is now %s", self._database.provider)
        return self._database
